"""
Strategy registry for lookup by provider name.

Several strategies can be active at once (e.g. Flyme next to others); each
registers under its fixed provider name, which is what the HTTP routes
receive as the {provider} path segment.
"""

from typing import Dict

from flyme_oauth.auth.strategy import OAuth2Strategy
from flyme_oauth.exceptions import StrategyNotFoundError


class StrategyRegistry:
    """
    Central registry of configured strategy instances.
    
    Uses class-level state so routes and application startup share one
    registry without passing it around.
    
    Example Usage:
        StrategyRegistry.register(FlymeStrategy(options, verify))
        strategy = StrategyRegistry.get("flyme")
    """
    
    _strategies: Dict[str, OAuth2Strategy] = {}
    
    @classmethod
    def register(cls, strategy: OAuth2Strategy) -> None:
        """
        Register a strategy under its name.
        
        Registering the same instance twice is a no-op.
        
        Raises:
            ValueError: If the name is already taken by another instance
        """
        existing = cls._strategies.get(strategy.name)
        if existing is not None:
            if existing is not strategy:
                raise ValueError(
                    f"Strategy '{strategy.name}' is already registered. "
                    f"Cannot re-register with a different instance."
                )
            return
        
        cls._strategies[strategy.name] = strategy
    
    @classmethod
    def get(cls, name: str) -> OAuth2Strategy:
        """
        Raises:
            StrategyNotFoundError: If no strategy is registered with that name.
        """
        if name not in cls._strategies:
            raise StrategyNotFoundError(name, cls.list_strategies())
        return cls._strategies[name]
    
    @classmethod
    def list_strategies(cls) -> list[str]:
        return sorted(cls._strategies.keys())
    
    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._strategies
    
    @classmethod
    def clear(cls) -> None:
        """Remove all strategies. Used by tests to reset state."""
        cls._strategies.clear()
