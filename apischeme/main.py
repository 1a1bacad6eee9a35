from apischeme.api.main import app
from apischeme.core.settings import Settings

if __name__ == "__main__":
    import uvicorn
    settings = Settings.from_env()
    uvicorn.run(app, host=settings.host, port=settings.port)
