import sys

from loguru import logger

from kinmesh.api import create_app
from kinmesh.config import settings
from kinmesh.memorial_store.local import LocalMemorialStore

logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

logger.info(f"Loading memorial store from {settings.local_memorial_store_path}")
store = LocalMemorialStore(settings.local_memorial_store_path)
app = create_app(store=store)
