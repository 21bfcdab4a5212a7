"""
Scenario definition error classifications.

These exceptions describe problems turning external scenario and plan data
into company and strategy objects. The simulation core itself never raises.
"""

from typing import Optional, Dict, Any


class ScenarioError(Exception):
    """Base class for invalid scenario or plan definitions."""
    
    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class MissingFieldError(ScenarioError):
    """A required field is absent from the definition."""
    
    def __init__(self, message: str, field_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_name = field_name


class MalformedFieldError(ScenarioError):
    """A field exists but has the wrong type or is not numeric."""
    
    def __init__(self, message: str, field_name: Optional[str] = None, 
                 raw_value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_name = field_name
        self.raw_value = raw_value


class UnknownStrategyError(ScenarioError):
    """Plan entry names a strategy type that does not exist."""
    
    def __init__(self, message: str, strategy_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.strategy_type = strategy_type


class ScenarioNotFoundError(ScenarioError):
    """Scenario file could not be located."""
    
    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path
