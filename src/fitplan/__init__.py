"""fitplan: calorie and weight goal planning."""

__version__ = "0.1.0"
