"""
Coordinate Resolver - Cadeia ordenada de estratégias de geocodificação

Ordem fixa (primeiro sucesso vence, sem ranking de candidatos):
1. Código postal numérico: país padrão e depois cada país de postal_code_countries
2. Se TODAS as tentativas postais retornaram 404 -> LocationNotFoundException
3. Texto livre com o endereço informado
4. Endereço numérico: texto livre com sufixo do país padrão
5. Texto livre com sufixo de cada país de fallback_countries
   (códigos postais alfanuméricos também tentam o endpoint postal do país)
6. Nada encontrado -> None (falha transitória/ambígua, diferente de NotFound)
"""
from dataclasses import dataclass, field
from functools import partial
from typing import Awaitable, Callable, List, Optional, Tuple

from ddtrace import tracer

from application.ports.output.geocoding_provider_port import IGeocodingProvider
from domain.constants import Geocoding
from domain.exceptions import (
    InvalidAddressException,
    LocationNotFoundException,
    ProviderException,
)
from domain.value_objects.coordinates import Coordinates
from domain.value_objects.geocode_attempt import GeocodeAttempt
from domain.value_objects.normalized_address import (
    is_numeric_postal_code,
    looks_like_alphanumeric_postal_code,
)
from shared.config.logger_config import get_logger

logger = get_logger(child=True)

GeocodeStrategy = Tuple[str, Callable[[], Awaitable[GeocodeAttempt]]]


@dataclass(frozen=True)
class ResolverConfig:
    """Ordem das estratégias, passada explicitamente (sem listas globais mutáveis)"""
    default_country: str = Geocoding.DEFAULT_COUNTRY
    postal_code_countries: Tuple[str, ...] = Geocoding.POSTAL_CODE_COUNTRIES
    fallback_countries: Tuple[str, ...] = Geocoding.FALLBACK_COUNTRIES


@dataclass
class _ChainState:
    """Contabiliza tentativas de uma passada de resolução"""
    attempted: int = 0
    provider_failures: int = 0
    last_error: Optional[ProviderException] = None
    tried: set = field(default_factory=set)


class CoordinateResolver:
    """Converte endereço livre em coordenadas usando um IGeocodingProvider"""

    def __init__(
        self,
        geocoding_provider: IGeocodingProvider,
        config: Optional[ResolverConfig] = None
    ):
        self.geocoding_provider = geocoding_provider
        self.config = config or ResolverConfig()

    @tracer.wrap(resource="coordinate_resolver.resolve")
    async def resolve(self, address: str) -> Optional[Coordinates]:
        """
        Resolve endereço em coordenadas

        Args:
            address: Endereço informado (é usado sem normalizar caixa)

        Returns:
            Coordinates do primeiro sucesso, ou None se nenhuma estratégia resolveu

        Raises:
            InvalidAddressException: Endereço vazio
            LocationNotFoundException: Código postal inexistente em todos os países
            ProviderException: Nenhuma chamada chegou a ser respondida pelo provider
        """
        query = (address or "").strip()
        if not query:
            raise InvalidAddressException("Address cannot be empty", details={"address": address})

        state = _ChainState()

        if is_numeric_postal_code(query):
            logger.info("Endereço parece código postal, priorizando endpoint postal", address=query)
            postal_strategies = self._postal_code_strategies(query)
            coordinates, attempts = await self._run(postal_strategies, state)
            if coordinates is not None:
                return coordinates

            if len(attempts) == len(postal_strategies) and all(a.is_not_found for a in attempts):
                logger.info(
                    "Código postal inexistente em todos os países tentados",
                    address=query,
                    countries=[self.config.default_country, *self.config.postal_code_countries]
                )
                raise LocationNotFoundException(
                    f"ZIP code '{query}' does not exist. Please enter a valid ZIP code.",
                    details={"address": query, "attempts": len(attempts)}
                )

        coordinates, _ = await self._run(self._free_text_strategies(query), state)
        if coordinates is not None:
            return coordinates

        if state.attempted and state.provider_failures == state.attempted and state.last_error:
            logger.error(
                "Provider de geocodificação indisponível em todas as tentativas",
                address=query,
                attempts=state.attempted
            )
            raise state.last_error

        logger.warning("Falha ao geocodificar endereço em todos os formatos", address=query, attempts=state.attempted)
        return None

    def _postal_code_strategies(self, postal_code: str) -> List[GeocodeStrategy]:
        countries = [self.config.default_country, *self.config.postal_code_countries]
        return [
            (f"postal:{postal_code},{country}", partial(self.geocoding_provider.geocode_postal_code, postal_code, country))
            for country in dict.fromkeys(countries)
        ]

    def _free_text_strategies(self, query: str) -> List[GeocodeStrategy]:
        direct = self.geocoding_provider.geocode_direct
        strategies: List[GeocodeStrategy] = [(f"direct:{query}", partial(direct, query))]

        if is_numeric_postal_code(query):
            suffixed = f"{query},{self.config.default_country}"
            strategies.append((f"direct:{suffixed}", partial(direct, suffixed)))

        sweep_postal = looks_like_alphanumeric_postal_code(query)
        for country in self.config.fallback_countries:
            suffixed = f"{query},{country}"
            strategies.append((f"direct:{suffixed}", partial(direct, suffixed)))
            if sweep_postal:
                strategies.append((
                    f"postal:{query},{country}",
                    partial(self.geocoding_provider.geocode_postal_code, query, country)
                ))

        return strategies

    async def _run(
        self,
        strategies: List[GeocodeStrategy],
        state: _ChainState
    ) -> Tuple[Optional[Coordinates], List[GeocodeAttempt]]:
        """
        Executa estratégias em ordem até o primeiro sucesso

        Cada chamada é feita no máximo uma vez por passada (labels repetidos são ignorados).
        Erros do provider contam como tentativa transitória e a cadeia continua.
        """
        attempts: List[GeocodeAttempt] = []

        for label, strategy in strategies:
            if label in state.tried:
                continue
            state.tried.add(label)
            state.attempted += 1

            try:
                attempt = await strategy()
            except ProviderException as ex:
                state.provider_failures += 1
                state.last_error = ex
                logger.warning(
                    "Estratégia de geocodificação falhou",
                    provider=self.geocoding_provider.provider_name,
                    strategy=label,
                    error=str(ex)
                )
                continue

            attempts.append(attempt)
            if attempt.is_found:
                logger.info(
                    "Endereço geocodificado",
                    provider=self.geocoding_provider.provider_name,
                    strategy=label,
                    latitude=attempt.coordinates.latitude,
                    longitude=attempt.coordinates.longitude,
                    resolved_name=attempt.coordinates.resolved_name
                )
                return attempt.coordinates, attempts

            logger.debug("Estratégia sem resultado", strategy=label, status=attempt.status.value)

        return None, attempts
