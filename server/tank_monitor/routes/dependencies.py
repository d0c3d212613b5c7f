"""FastAPI dependencies resolving the application's services"""
from fastapi import Request

from tank_monitor.services.container import ServiceContainer
from tank_monitor.services.ingestion import IngestionService
from tank_monitor.services.parameters import ParameterStore
from tank_monitor.services.query import QueryService


def get_services(request: Request) -> ServiceContainer:
    return request.app.state.services


def get_query_service(request: Request) -> QueryService:
    return get_services(request).query


def get_ingestion_service(request: Request) -> IngestionService:
    return get_services(request).ingestion


def get_parameter_store(request: Request) -> ParameterStore:
    return get_services(request).parameters
