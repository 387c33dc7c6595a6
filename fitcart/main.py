from fastapi import FastAPI

from .error_handlers import register_error_handlers
from .routes import cart, catalog, nutrition, profile

app = FastAPI(title="FitCart")

register_error_handlers(app)

app.include_router(catalog.router)
app.include_router(cart.router)
app.include_router(profile.router)
app.include_router(nutrition.router)
