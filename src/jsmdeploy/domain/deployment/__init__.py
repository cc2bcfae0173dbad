"""Building blocks of the typed change deployment pipeline."""

from __future__ import annotations

from .chain import run_deploy_filters
from .errors import DeploymentError
from .partition import partition_changes
from .service_id import (
    ResponseValue,
    ServiceIdSetter,
    default_service_id_setter,
    queue_service_id_setter,
    select_service_id_setter,
)
from .type_rewrite import replace_element_type_for_deploy, replace_instance_type_for_deploy

__all__ = [
    "DeploymentError",
    "ResponseValue",
    "ServiceIdSetter",
    "default_service_id_setter",
    "partition_changes",
    "queue_service_id_setter",
    "replace_element_type_for_deploy",
    "replace_instance_type_for_deploy",
    "run_deploy_filters",
    "select_service_id_setter",
]
