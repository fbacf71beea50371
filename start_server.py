"""
HTTP Server Entry Point
Serves the API on HOST:PORT (default 0.0.0.0:5000)
"""
import uvicorn
from app.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
