import logging
import os
import sys

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import Response

# Ensure project packages are importable when run as a script
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '../')))

from config.settings import DEFAULT_DATABASE_PATH
from tracker_stats.schema import SnapshotFileError, SnapshotFormatError, StatsSnapshot
from tracker_stats.utils import load_config, get_option
from .schema import HealthResponse

CONFIG = load_config() or {}

# --- LOGGING CONFIGURATION ---
logging.basicConfig(
    level=get_option(CONFIG, 'logging', 'level', 'INFO'),
    format="%(asctime)s [%(levelname)s] [API] %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Tracker Stats Snapshot")


def get_database_path():
    return get_option(CONFIG, 'source', 'file') or str(DEFAULT_DATABASE_PATH)


def read_snapshot(path):
    try:
        return StatsSnapshot.from_file(path)
    except SnapshotFileError as e:
        logger.warning(f"⚠️ {e}")
        raise HTTPException(status_code=404, detail="Stats database not found")
    except SnapshotFormatError as e:
        logger.error(f"❌ {e}")
        raise HTTPException(status_code=500, detail="Stats database is malformed")


@app.get("/database.json")
def get_database(path: str = Depends(get_database_path)):
    """Serve the stats log in the shape the dashboard consumes."""
    snapshot = read_snapshot(path)
    logger.info(f"📤 Serving snapshot with {len(snapshot)} entries")
    return Response(content=snapshot.to_json_string(), media_type="application/json")


@app.get("/health", response_model=HealthResponse)
def health(path: str = Depends(get_database_path)):
    try:
        snapshot = StatsSnapshot.from_file(path)
    except (SnapshotFileError, SnapshotFormatError) as e:
        return {"status": "degraded", "detail": str(e)}
    return {"status": "healthy", "entries": len(snapshot)}


if __name__ == "__main__":
    import uvicorn
    host = get_option(CONFIG, 'api', 'host', '0.0.0.0')
    port = get_option(CONFIG, 'api', 'port', 8080)

    uvicorn.run(app, host=host, port=port)
