# deptboard/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from deptboard.core.config import CONFIG
from deptboard.core.errors import add_error_handlers
from deptboard.core.security import check_secret_key
from deptboard.routes.analytics import router as analytics_router
from deptboard.routes.auth_routes import router as auth_router
from deptboard.routes.hod import router as hod_router

app = FastAPI(
    title="Department Dashboard API",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CONFIG.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

check_secret_key()

# Every unhandled failure becomes a 500 {"message": ...}
add_error_handlers(app)


@app.get("/")
def root_index():
    return {"message": "Department Dashboard API is running", "docs": "/docs"}


app.include_router(auth_router, prefix="/api")
app.include_router(hod_router, prefix="/api")
app.include_router(analytics_router, prefix="/api")
