from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.logging import configure_logging
from app.routes.profile.profile_routers import profile_router
from app.routes.match.match_routers import match_router

configure_logging(json_logs=settings.JSON_LOGS, log_level=settings.LOG_LEVEL)

app = FastAPI(title="Roommate Matching API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(profile_router)
app.include_router(match_router)


@app.get("/", response_class=HTMLResponse)
async def read_root():
    return """
    <html>
        <head>
            <title>Roommate Matching</title>
        </head>
        <body>
            <h1>Roommate Matching API</h1>
            <p>See the API documentation <a href="/docs">here</a>.</p>
        </body>
    </html>
    """
