"""Development entry point: `python main.py` serves the seed API on port 8000."""

import os

from dashboard_seed.main import app

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
