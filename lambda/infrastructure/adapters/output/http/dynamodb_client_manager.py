"""
DynamoDB Client Manager - cliente aioboto3 reutilizado dentro do mesmo event loop
"""
import asyncio
from typing import Optional

import aioboto3
from botocore.config import Config

from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class DynamoDBClientManager:
    """
    Gerenciador de cliente DynamoDB com aioboto3

    - Reutiliza cliente entre invocações Lambda (warm starts)
    - Recria o cliente quando o event loop muda (asyncio.run cria novos loops)
    - Uma única tentativa por chamada (sem retries do botocore)

    Uso:
        manager = get_dynamodb_client_manager(region_name="us-east-1")
        client = await manager.get_client()
        response = await client.get_item(...)
    """

    def __init__(
        self,
        region_name: str = 'us-east-1',
        max_pool_connections: int = 50,
        connect_timeout: int = 3,
        read_timeout: int = 3
    ):
        self.region_name = region_name
        self.session = aioboto3.Session()
        self.boto_config = Config(
            region_name=region_name,
            max_pool_connections=max_pool_connections,
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            retries={'max_attempts': 1, 'mode': 'standard'}
        )

        self._client = None
        self._client_loop_id: Optional[int] = None
        self._client_context_manager = None

    async def get_client(self):
        """
        Retorna cliente DynamoDB (cria ou reutiliza no loop atual)

        Raises:
            RuntimeError: Sem event loop em execução ou falha ao criar o cliente
        """
        current_loop_id = id(asyncio.get_running_loop())

        if self._client is not None and self._client_loop_id == current_loop_id:
            return self._client

        if self._client is not None:
            logger.info("Event loop mudou - recriando cliente DynamoDB", old_loop_id=self._client_loop_id)
            await self._close_client()

        try:
            self._client_context_manager = self.session.client(
                'dynamodb',
                region_name=self.region_name,
                config=self.boto_config
            )
            self._client = await self._client_context_manager.__aenter__()
            self._client_loop_id = current_loop_id
        except Exception as e:
            self._client = None
            self._client_loop_id = None
            self._client_context_manager = None
            raise RuntimeError(f"Failed to create DynamoDB client: {str(e)}") from e

        return self._client

    async def _close_client(self) -> None:
        if self._client is None:
            return

        try:
            if self._client_context_manager is not None:
                await self._client_context_manager.__aexit__(None, None, None)
        except Exception as e:
            logger.warning("Erro ao fechar cliente DynamoDB", error=str(e))
        finally:
            self._client = None
            self._client_loop_id = None
            self._client_context_manager = None

    async def cleanup(self) -> None:
        """Fecha cliente e libera recursos (opcional ao final da invocação)"""
        await self._close_client()


_manager_instance: Optional[DynamoDBClientManager] = None


def get_dynamodb_client_manager(region_name: str = 'us-east-1', **kwargs) -> DynamoDBClientManager:
    """
    Retorna instância singleton do gerenciador
    Parâmetros só têm efeito na primeira criação
    """
    global _manager_instance

    if _manager_instance is None:
        _manager_instance = DynamoDBClientManager(region_name=region_name, **kwargs)

    return _manager_instance
