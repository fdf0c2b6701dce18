from fastapi import APIRouter

router = APIRouter(prefix="/api/v1")

from . import routes_health, routes_multilateration, routes_locate  # noqa: E402

router.include_router(routes_health.router)
router.include_router(routes_multilateration.router)
router.include_router(routes_locate.router)
