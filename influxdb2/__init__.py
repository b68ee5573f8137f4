"""Line protocol encoding and JSON data models for the InfluxDB 2 API."""

__version__ = "0.1.0"