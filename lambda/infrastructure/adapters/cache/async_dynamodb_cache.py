"""
Async DynamoDB Weather Cache - backend persistente com aioboto3

Tabela:
    partition key: address (S)  -> endereço normalizado
    sort key:      location (S) -> "lat,lon" (ou "-" para chave só de endereço)

Estrutura do item:
{
    "address": "10001",
    "location": "40.75,-73.99",
    "data": "{...}",               # WeatherRecord serializado (JSON compacto)
    "createdAt": "2025-11-25T10:00:00+00:00",
    "createdAtEpoch": 1764064800.0, # filtro de frescor
    "ttl": 1764066600               # expiração nativa do DynamoDB (limpeza)
}
"""
import json
from datetime import datetime
from decimal import Decimal
from typing import Optional, Dict, Any, List

from ddtrace import tracer

from domain.constants import Cache
from domain.entities.cache_entry import CacheEntry, CacheKey
from infrastructure.adapters.output.http.dynamodb_client_manager import get_dynamodb_client_manager
from shared.config.logger_config import get_logger
from shared.utils.clock import Clock, utc_now

logger = get_logger(child=True)

ADDRESS_ONLY_LOCATION = "-"


class DecimalEncoder(json.JSONEncoder):
    """Encoder JSON para converter Decimal em float"""
    def default(self, obj):
        if isinstance(obj, Decimal):
            return float(obj)
        return super().default(obj)


class AsyncDynamoDBWeatherCache:
    """
    Cache DynamoDB 100% assíncrono

    - get por (endereço, localização): GetItem
    - get só por endereço: Query na partição, entrada fresca mais recente
    - frescor verificado no código (o TTL nativo do DynamoDB não é imediato)
    - erros do DynamoDB são registrados e tratados como MISS / escrita ignorada
    """

    def __init__(
        self,
        table_name: str = Cache.DEFAULT_TABLE_NAME,
        region_name: str = 'us-east-1',
        freshness_seconds: int = Cache.FRESHNESS_SECONDS,
        enabled: bool = True,
        client_manager=None,
        clock: Clock = utc_now
    ):
        self.table_name = table_name
        self.region_name = region_name
        self.freshness_seconds = freshness_seconds
        self.enabled = enabled
        self._clock = clock
        self.client_manager = client_manager or get_dynamodb_client_manager(
            region_name=region_name,
            max_pool_connections=50,
            connect_timeout=3,
            read_timeout=3
        )

    def is_enabled(self) -> bool:
        """Verifica se cache está habilitado"""
        return self.enabled

    @tracer.wrap(resource="async_cache.get")
    async def get(self, key: CacheKey) -> Optional[CacheEntry]:
        """
        Busca entrada fresca

        Returns:
            CacheEntry ou None se não encontrada/expirada/erro
        """
        if not self.is_enabled():
            return None

        now = self._clock()

        try:
            client = await self.client_manager.get_client()

            if key.is_address_only:
                items = await self._query_address(client, key.address, now)
            else:
                response = await client.get_item(
                    TableName=self.table_name,
                    Key={
                        'address': {'S': key.address},
                        'location': {'S': key.location}
                    },
                    ConsistentRead=False
                )
                items = [response['Item']] if 'Item' in response else []

            entries = [self._item_to_entry(item) for item in items]

        except Exception as ex:
            logger.warning("Falha ao ler cache DynamoDB", cache_key=str(key), error=str(ex))
            return None

        fresh = [entry for entry in entries if entry.is_fresh(now, self.freshness_seconds)]
        if not fresh:
            return None

        return max(fresh, key=lambda entry: entry.created_at)

    @tracer.wrap(resource="async_cache.put")
    async def put(self, key: CacheKey, record: Dict[str, Any]) -> Optional[CacheEntry]:
        """
        Armazena registro com carimbo atual (sobrescreve a chave)

        Returns:
            CacheEntry criada ou None em caso de erro
        """
        if not self.is_enabled():
            return None

        now = self._clock()
        entry = CacheEntry(key=key, record=record, created_at=now)

        item = {
            'address': {'S': key.address},
            'location': {'S': key.location or ADDRESS_ONLY_LOCATION},
            'data': {'S': json.dumps(record, cls=DecimalEncoder, separators=(',', ':'))},
            'createdAt': {'S': now.isoformat()},
            'createdAtEpoch': {'N': str(now.timestamp())},
            'ttl': {'N': str(int(now.timestamp()) + self.freshness_seconds)}
        }

        try:
            client = await self.client_manager.get_client()
            await client.put_item(TableName=self.table_name, Item=item)
        except Exception as ex:
            logger.warning("Falha ao gravar cache DynamoDB", cache_key=str(key), error=str(ex))
            return None

        return entry

    async def _query_address(self, client, address: str, now: datetime) -> List[Dict[str, Any]]:
        cutoff = now.timestamp() - self.freshness_seconds
        items: List[Dict[str, Any]] = []
        query_kwargs = {
            'TableName': self.table_name,
            'KeyConditionExpression': '#addr = :address',
            'FilterExpression': '#created > :cutoff',
            'ExpressionAttributeNames': {'#addr': 'address', '#created': 'createdAtEpoch'},
            'ExpressionAttributeValues': {
                ':address': {'S': address},
                ':cutoff': {'N': str(cutoff)}
            }
        }

        while True:
            response = await client.query(**query_kwargs)
            items.extend(response.get('Items', []))
            last_key = response.get('LastEvaluatedKey')
            if not last_key:
                return items
            query_kwargs['ExclusiveStartKey'] = last_key

    @staticmethod
    def _item_to_entry(item: Dict[str, Any]) -> CacheEntry:
        location = item['location']['S']
        return CacheEntry(
            key=CacheKey(
                address=item['address']['S'],
                location=None if location == ADDRESS_ONLY_LOCATION else location
            ),
            record=json.loads(item['data']['S']),
            created_at=datetime.fromisoformat(item['createdAt']['S'])
        )

    async def cleanup(self) -> None:
        """Delega cleanup para o gerenciador de cliente"""
        await self.client_manager.cleanup()
