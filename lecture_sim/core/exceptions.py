"""
Custom exceptions for the lecture simulator.
"""

from typing import Optional, Any, Dict


class SimulationException(Exception):
    """Base exception for all simulator errors."""
    
    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ValidationError(SimulationException):
    """Raised when entity data is invalid."""
    pass


class ConfigurationError(SimulationException):
    """Raised when configuration is invalid."""
    pass


class PhaseError(SimulationException):
    """Raised when a simulation phase is run out of order."""
    pass
