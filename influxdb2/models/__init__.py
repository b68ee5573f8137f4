"""Data models for the InfluxDB 2 API, the Flux AST and line protocol data points."""