import httpx
import uvicorn
from fastapi import Depends, FastAPI, Query
from fastapi.responses import JSONResponse
from news_reader.config import get_settings
from news_reader.errors import BadRequest, NewsAPIError
from news_reader.log import configure_logging
from news_reader.models import Country
from news_reader.news_client import NewsAPI
from loguru import logger

settings = get_settings()
app = FastAPI(title="News Reader")
# one client for every in-flight request, closed on shutdown
http_client = httpx.AsyncClient(timeout=settings.request_timeout)

def get_news_api() -> NewsAPI:
    return NewsAPI.from_settings(settings, async_client=http_client)

@app.get("/health")
async def health():
    return {"status": "ok"}

@app.get("/headlines")
async def headlines(
    country: Country = Query(settings.news_country),
    api: NewsAPI = Depends(get_news_api),
):
    """Top headlines as a list of {title, url} cards."""
    try:
        response = await api.set_country(country).fetch_async()
    except BadRequest as e:
        logger.warning("News service rejected the request: {}", e.reason)
        return JSONResponse(status_code=502, content={"error": str(e)})
    except NewsAPIError as e:
        logger.exception("Failed fetching headlines")
        return JSONResponse(status_code=502, content={"error": str(e)})

    return {"articles": [{"title": a.title, "url": a.url} for a in response.articles]}

@app.on_event("shutdown")
async def shutdown_event():
    await http_client.aclose()

def run():
    configure_logging(settings.log_level)
    uvicorn.run("main:app", host="0.0.0.0", port=settings.port)

if __name__ == "__main__":
    run()
