"""Application routers."""
