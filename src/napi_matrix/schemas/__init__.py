"""JSON schemas bundled with napi_matrix."""
