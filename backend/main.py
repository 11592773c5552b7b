# backend/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from database import init_db
from config import settings
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Import routerów
from routes.auth import router as auth_router
from routes.products import router as products_router
from routes.categories import router as categories_router
from routes.cart import router as cart_router
from routes.upload import router as upload_router
from routes.visitor_logs import router as visitor_logs_router
from routes.stats import router as stats_router

# Inicjalizacja
init_db()

app = FastAPI(title="Storefront API", version="1.0.0")

# Uploads - upewniamy się, że katalog istnieje
Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")

# CORS Configuration
origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

if settings.FRONTEND_URL:
    origins.append(settings.FRONTEND_URL)

# Cookies carry the admin session, so origins must be explicit
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Rejestracja routerów
app.include_router(auth_router)
app.include_router(products_router)
app.include_router(categories_router)
app.include_router(cart_router)
app.include_router(upload_router)
app.include_router(visitor_logs_router)
app.include_router(stats_router)

@app.get("/")
def read_root():
    return {"message": "Storefront API is running"}
