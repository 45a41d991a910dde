from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from hrm.domain.auth.query.my_access import GetMyAccess, GetMyAccessHandler, MyAccessResult

router = APIRouter(prefix="/me", tags=["Me"], route_class=DishkaRoute)


@router.get("/access", response_model=MyAccessResult)
async def get_my_access(handler: FromDishka[GetMyAccessHandler]) -> MyAccessResult:
    """The caller's role, effective permissions, features and dashboard path."""
    return await handler.run(GetMyAccess())
