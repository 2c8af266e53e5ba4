"""
Testing endpoints router for the content creator service
"""

from typing import Callable
from fastapi import APIRouter, Depends
from app_startup.state import AppState
from configs.endpoints_base_models import SQLQueryRequest
from utils.database_service import DatabaseService


def get_testing_router(app_state_getter: Callable[..., AppState]) -> APIRouter:
    """
    Create testing router with app state dependency

    Args:
        app_state_getter: Dependency returning the app state

    Returns:
        APIRouter exposing the database tools directly
    """
    router = APIRouter(prefix="/testing", tags=["testing"])

    @router.get("/test-connection")
    async def test_database_connection(app_state: AppState = Depends(app_state_getter)):
        """
        Check the database the agent writes to

        Returns:
            Server time and PostgreSQL version, or the connection error
        """
        return await DatabaseService.test_connection(app_state.database)

    @router.post("/run-sql")
    async def run_sql_statement(request: SQLQueryRequest, app_state: AppState = Depends(app_state_getter)):
        """
        Execute a SQL statement exactly as the agent's run_sql tool would

        Args:
            request: SQLQueryRequest containing the statement

        Returns:
            The tool's result record
        """
        return await DatabaseService.execute_sql(request.sql, app_state.database)

    return router
