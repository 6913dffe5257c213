"""Labour Chowk worker-job matching and rate suggestion engine."""

__app_name__ = "labour-chowk"
__version__ = "0.1.0"
