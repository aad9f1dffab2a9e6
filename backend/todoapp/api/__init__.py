from fastapi import APIRouter
from todoapp.api.routes import actions_router, auth_router, session_router, todos_router

api_router = APIRouter()
api_router.include_router(session_router)
api_router.include_router(auth_router)
api_router.include_router(todos_router)
api_router.include_router(actions_router)
