from fastapi import APIRouter
from app.api.routes.auth import router as auth_router
from app.api.routes.catalog import router as catalog_router
from app.api.routes.flights import router as flights_router
from app.api.routes.bookings import router as bookings_router
from app.api.routes.reviews import router as reviews_router
from app.api.routes.wishlist import router as wishlist_router

api_router = APIRouter(prefix="/api")
api_router.include_router(auth_router)
api_router.include_router(catalog_router)
api_router.include_router(flights_router)
api_router.include_router(bookings_router)
api_router.include_router(reviews_router)
api_router.include_router(wishlist_router)
