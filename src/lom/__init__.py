"""Land of Mist combat-resolution library."""

__version__ = "0.1.0"
