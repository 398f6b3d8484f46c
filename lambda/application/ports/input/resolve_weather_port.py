"""
Input Port: Interface para resolver o clima a partir de um endereço livre
"""
from abc import ABC, abstractmethod

from domain.entities.resolution_outcome import ResolutionOutcome


class IResolveWeatherUseCase(ABC):
    """Interface para caso de uso de resolução de clima por endereço"""

    @abstractmethod
    async def execute(self, address: str) -> ResolutionOutcome:
        """
        Resolve endereço em clima atual + previsão

        Args:
            address: Cidade, "Cidade, País" ou código postal

        Returns:
            CacheHit | Fresh | NotFound | Failure (nunca lança exceção de domínio)
        """
        pass
