"""
Aiohttp Session Manager - sessão HTTP compartilhada por event loop
Reutiliza sessão entre invocações Lambda (warm starts)
"""
import asyncio
from typing import Optional

import aiohttp

from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class AiohttpSessionManager:
    """
    Gerenciador de sessão aiohttp

    - Sessão persiste dentro do mesmo event loop
    - Recriada quando o loop muda ou a sessão foi fechada
    - Todos os requests têm timeout limitado (ClientTimeout)

    Uso:
        manager = get_aiohttp_session_manager()
        session = await manager.get_session()
        async with session.get(url) as response:
            data = await response.json()
    """

    def __init__(
        self,
        total_timeout: int = 8,
        connect_timeout: int = 3,
        sock_read_timeout: int = 5,
        limit: int = 100,
        limit_per_host: int = 30,
        ttl_dns_cache: int = 300
    ):
        self.total_timeout = total_timeout
        self.connect_timeout = connect_timeout
        self.sock_read_timeout = sock_read_timeout
        self.limit = limit
        self.limit_per_host = limit_per_host
        self.ttl_dns_cache = ttl_dns_cache

        self._session: Optional[aiohttp.ClientSession] = None
        self._session_loop_id: Optional[int] = None

    async def get_session(self) -> aiohttp.ClientSession:
        """
        Retorna sessão aiohttp (cria ou reutiliza)

        Raises:
            RuntimeError: Se chamado fora de um event loop
        """
        current_loop_id = id(asyncio.get_running_loop())

        if (self._session is not None
                and not self._session.closed
                and self._session_loop_id == current_loop_id):
            return self._session

        if self._session is not None and not self._session.closed:
            logger.info(
                "Event loop mudou - recriando sessão",
                old_loop_id=self._session_loop_id,
                new_loop_id=current_loop_id
            )
            await self._close_session()

        timeout = aiohttp.ClientTimeout(
            total=self.total_timeout,
            connect=self.connect_timeout,
            sock_read=self.sock_read_timeout
        )
        connector = aiohttp.TCPConnector(
            limit=self.limit,
            limit_per_host=self.limit_per_host,
            ttl_dns_cache=self.ttl_dns_cache
        )
        self._session = aiohttp.ClientSession(timeout=timeout, connector=connector)
        self._session_loop_id = current_loop_id

        logger.info("Sessão aiohttp criada", loop_id=current_loop_id, limit=self.limit)
        return self._session

    async def _close_session(self) -> None:
        if self._session is None or self._session.closed:
            return

        try:
            await self._session.close()
        except Exception as e:
            logger.warning("Erro ao fechar sessão aiohttp", error=str(e), loop_id=self._session_loop_id)
        finally:
            self._session = None
            self._session_loop_id = None

    async def cleanup(self) -> None:
        """Fecha sessão (opcional ao final da invocação)"""
        await self._close_session()


_manager_instance: Optional[AiohttpSessionManager] = None


def get_aiohttp_session_manager(**kwargs) -> AiohttpSessionManager:
    """
    Factory singleton do gerenciador de sessão
    Parâmetros só têm efeito na primeira criação
    """
    global _manager_instance

    if _manager_instance is None:
        _manager_instance = AiohttpSessionManager(**kwargs)

    return _manager_instance
