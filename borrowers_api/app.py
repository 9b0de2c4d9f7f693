# ============================================================
# Borrowers HTTP API
# ------------------------------------------------------------
# Serves the borrowers dataset straight from a local JSON file:
#   - GET /api/borrowers  -> file contents, verbatim
#   - Health checks for the hosting platform
# The file is re-read on every request (no caching).
# ============================================================

from fastapi import FastAPI
import uvicorn

# --- Local imports ---
from borrowers_api.settings import settings
from borrowers_api.errors import DataUnavailableError
from borrowers_api.logs import get_logger
from borrowers_api.presentation import raw_json_response, read_error_response
from borrowers_api.providers import FileBorrowerProvider

logger = get_logger("borrowers.http")

# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title=settings.app_name, version="0.1.0")

# ------------------------------------------------------------
# 📄 Dataset route
# ------------------------------------------------------------
@app.get("/api/borrowers")
def get_borrowers():
    provider = FileBorrowerProvider(settings.DATA_PATH)
    try:
        body = provider.read_raw()
    except DataUnavailableError as e:
        logger.error("Failed to read borrowers data: %s", e)
        return read_error_response()
    return raw_json_response(body)

# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}

@app.get("/")
def hello():
    return {"message": f"{settings.app_name} service running."}

# ------------------------------------------------------------
# ▶️ Entrypoint
# ------------------------------------------------------------
def main():
    logger.info("Server running on port %s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
