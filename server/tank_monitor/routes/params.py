"""PID parameter routes (read by the tank controller, updated from the dashboard)"""
from typing import Optional

from fastapi import APIRouter, Body, Depends

from tank_monitor.models.schemas import ErrorResponse, ParametersResponse, ParametersUpdate
from tank_monitor.routes.dependencies import get_parameter_store
from tank_monitor.services.parameters import ParameterStore

router = APIRouter(prefix="/api/params", tags=["parameters"])


@router.get("", response_model=ParametersResponse)
def get_params(parameters: ParameterStore = Depends(get_parameter_store)):
    """Get the current setpoint and gains"""
    return ParametersResponse.from_parameters(parameters.get())


@router.post("", response_model=ParametersResponse, responses={400: {"model": ErrorResponse}})
def update_params(
    update: Optional[ParametersUpdate] = Body(default=None),
    parameters: ParameterStore = Depends(get_parameter_store),
):
    """Update only the provided parameters"""
    changes = update.present_fields() if update is not None else {}
    return ParametersResponse.from_parameters(parameters.set(changes))
