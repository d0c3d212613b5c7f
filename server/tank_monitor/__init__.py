"""Water tank telemetry and PID parameter server"""

__version__ = "1.0.0"
