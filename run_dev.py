# run_dev.py
"""
Local development launcher for the borrowers HTTP API.
Equivalent to: `uvicorn borrowers_api.app:app --reload --host 0.0.0.0 --port $PORT`
"""

import uvicorn

from borrowers_api.settings import settings

if __name__ == "__main__":
    uvicorn.run(
        "borrowers_api.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True,
    )
