"""
Output Port: Interface para o armazenamento de registros de clima
Usado para desacoplar use cases de detalhes do cache (memória, DynamoDB, etc.)
"""
from typing import Protocol, Optional, Dict, Any

from domain.entities.cache_entry import CacheEntry, CacheKey


class IWeatherCacheRepository(Protocol):
    """
    Interface assíncrona para o cache de clima

    Contrato:
    - get devolve apenas entradas frescas (filtragem dentro do store)
    - put sempre cria nova entrada com o horário atual, sobrescrevendo a anterior
    - erros do backend não são propagados (miss / escrita ignorada)
    """

    def is_enabled(self) -> bool:
        """
        Verifica se o cache está habilitado
        """
        ...

    async def get(self, key: CacheKey) -> Optional[CacheEntry]:
        """
        Busca entrada fresca por chave
        """
        ...

    async def put(self, key: CacheKey, record: Dict[str, Any]) -> Optional[CacheEntry]:
        """
        Armazena registro serializado com carimbo de criação atual
        """
        ...
