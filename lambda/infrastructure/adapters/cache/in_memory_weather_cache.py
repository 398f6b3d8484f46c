"""
In-Memory Weather Cache - mapa com janela de frescor protegido por lock
Backend padrão (desenvolvimento, testes e Lambda com cache por instância)
"""
import threading
from typing import Dict, Any, Optional

from ddtrace import tracer

from domain.constants import Cache
from domain.entities.cache_entry import CacheEntry, CacheKey
from shared.config.logger_config import get_logger
from shared.utils.clock import Clock, utc_now

logger = get_logger(child=True)


class InMemoryWeatherCache:
    """
    Cache em memória keyed por endereço -> localização -> entrada

    - get devolve apenas entradas frescas (age < freshness_seconds)
    - get sem localização devolve a entrada fresca mais recente do endereço
    - put sempre cria nova entrada, sobrescrevendo a anterior da mesma chave
    - entradas expiradas são removidas na leitura e na escrita do endereço
    - seguro para leituras/escritas concorrentes (threading.Lock, sem await dentro)
    """

    def __init__(
        self,
        freshness_seconds: int = Cache.FRESHNESS_SECONDS,
        enabled: bool = True,
        clock: Clock = utc_now
    ):
        self.freshness_seconds = freshness_seconds
        self.enabled = enabled
        self._clock = clock
        self._entries: Dict[str, Dict[str, CacheEntry]] = {}
        self._lock = threading.Lock()

    def is_enabled(self) -> bool:
        """Verifica se cache está habilitado"""
        return self.enabled

    @tracer.wrap(resource="memory_cache.get")
    async def get(self, key: CacheKey) -> Optional[CacheEntry]:
        if not self.is_enabled():
            return None

        now = self._clock()
        with self._lock:
            bucket = self._entries.get(key.address)
            if not bucket:
                return None

            self._evict_expired(key.address, bucket, now)

            if key.is_address_only:
                fresh = list(bucket.values())
                return max(fresh, key=lambda entry: entry.created_at) if fresh else None

            return bucket.get(key.location)

    @tracer.wrap(resource="memory_cache.put")
    async def put(self, key: CacheKey, record: Dict[str, Any]) -> Optional[CacheEntry]:
        if not self.is_enabled():
            return None

        now = self._clock()
        entry = CacheEntry(key=key, record=record, created_at=now)

        with self._lock:
            existing = self._entries.get(key.address)
            if existing:
                self._evict_expired(key.address, existing, now)
            self._entries.setdefault(key.address, {})[key.location or ""] = entry

        return entry

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return sum(len(bucket) for bucket in self._entries.values())

    def _evict_expired(self, address: str, bucket: Dict[str, CacheEntry], now) -> None:
        """Remove entradas expiradas do endereço (chamado com o lock adquirido)"""
        expired = [
            location for location, entry in bucket.items()
            if not entry.is_fresh(now, self.freshness_seconds)
        ]
        for location in expired:
            del bucket[location]

        if expired:
            logger.debug("Entradas expiradas removidas", address=address, removed=len(expired))

        if not bucket:
            self._entries.pop(address, None)
