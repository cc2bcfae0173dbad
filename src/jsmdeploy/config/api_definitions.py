"""Declarative per-type API definitions for JSM and Assets deployments.

The models accept the camelCase keys used by the JSON configuration files
(``deployRequests``, ``fieldsToIgnore``...) as well as their snake_case names.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from jsmdeploy.constants import (
    CALENDAR_TYPE,
    CUSTOMER_PERMISSIONS_TYPE,
    OBJECT_SCHEMA_STATUS_TYPE,
    OBJECT_SCHEMA_TYPE,
    OBJECT_TYPE_TYPE,
    PORTAL_GROUP_TYPE,
    QUEUE_TYPE,
    REQUEST_TYPE_TYPE,
)
from jsmdeploy.domain.model import ChangeAction, PrimitiveType

from .errors import ConfigurationError

HttpMethod = Literal["post", "put", "patch", "delete"]

JSM_DUCKTYPE_SUPPORTED_TYPES: dict[str, tuple[str, ...]] = {
    REQUEST_TYPE_TYPE: (REQUEST_TYPE_TYPE,),
    QUEUE_TYPE: (QUEUE_TYPE,),
    PORTAL_GROUP_TYPE: (PORTAL_GROUP_TYPE,),
    CALENDAR_TYPE: (CALENDAR_TYPE,),
    CUSTOMER_PERMISSIONS_TYPE: (CUSTOMER_PERMISSIONS_TYPE,),
}


class ApiConfigModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class DeployRequest(ApiConfigModel):
    url: str
    method: HttpMethod
    fields_to_ignore: tuple[str, ...] = ()
    deploy_as_field: str | None = None
    url_params_to_fields: dict[str, str] = Field(default_factory=dict)
    omit_request_body: bool = False


class FieldTypeOverride(ApiConfigModel):
    field_name: str
    field_type: PrimitiveType


class TransformationConfig(ApiConfigModel):
    service_id_field: str = "id"
    deploy_type_name: str | None = None
    field_type_overrides: tuple[FieldTypeOverride, ...] = ()


class TypeDefinition(ApiConfigModel):
    transformation: TransformationConfig = Field(default_factory=TransformationConfig)
    deploy_requests: dict[ChangeAction, DeployRequest] | None = None

    def deploy_request_for(self, action: ChangeAction) -> DeployRequest | None:
        if self.deploy_requests is None:
            return None
        return self.deploy_requests.get(action)


class ApiDefinitions(ApiConfigModel):
    types: dict[str, TypeDefinition] = Field(default_factory=dict)


def load_api_definitions(path: Path) -> ApiDefinitions:
    """Read API definitions from a JSON file."""

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read API definitions from {path}: {exc}") from exc
    try:
        return ApiDefinitions.model_validate_json(text)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid API definitions in {path}: {exc}") from exc


_SERVICEDESK = "/rest/servicedesk/1/servicedesk/{projectKey}"
_SERVICEDESK_API = "/rest/servicedeskapi/servicedesk/projectId:{projectKey}"
_ASSETS = "/gateway/api/jsm/assets/workspace/{workspaceId}/v1"


def default_jsm_api_definitions() -> ApiDefinitions:
    """Return the built-in definitions for every supported JSM and Assets type."""

    return ApiDefinitions.model_validate(
        {
            "types": {
                REQUEST_TYPE_TYPE: {
                    "deployRequests": {
                        "add": {
                            "url": f"{_SERVICEDESK_API}/requesttype",
                            "method": "post",
                            "fieldsToIgnore": ["projectKey", "icon"],
                        },
                        "modify": {
                            "url": f"{_SERVICEDESK}/request-types/{{id}}",
                            "method": "put",
                            "fieldsToIgnore": ["projectKey", "icon"],
                        },
                        "remove": {
                            "url": f"{_SERVICEDESK_API}/requesttype/{{id}}",
                            "method": "delete",
                            "omitRequestBody": True,
                        },
                    },
                },
                QUEUE_TYPE: {
                    "transformation": {
                        "fieldTypeOverrides": [{"fieldName": "id", "fieldType": "string"}],
                    },
                    "deployRequests": {
                        "add": {
                            "url": f"{_SERVICEDESK}/queues",
                            "method": "post",
                            "fieldsToIgnore": ["projectKey", "canBeHidden", "favourite"],
                        },
                        "modify": {
                            "url": f"{_SERVICEDESK}/queues/{{id}}",
                            "method": "put",
                            "fieldsToIgnore": ["projectKey", "canBeHidden", "favourite"],
                        },
                        "remove": {
                            "url": f"{_SERVICEDESK}/queues",
                            "method": "delete",
                            "deployAsField": "deleted",
                            "fieldsToIgnore": [
                                "projectKey",
                                "name",
                                "jql",
                                "columns",
                                "canBeHidden",
                                "favourite",
                            ],
                        },
                    },
                },
                PORTAL_GROUP_TYPE: {
                    "deployRequests": {
                        "add": {
                            "url": f"{_SERVICEDESK}/portal-groups",
                            "method": "post",
                            "fieldsToIgnore": ["projectKey", "ticketTypeIds"],
                        },
                        "modify": {
                            "url": f"{_SERVICEDESK}/portal-groups/{{id}}",
                            "method": "put",
                            "fieldsToIgnore": ["projectKey", "ticketTypeIds"],
                        },
                        "remove": {
                            "url": f"{_SERVICEDESK}/portal-groups/{{id}}",
                            "method": "delete",
                            "omitRequestBody": True,
                        },
                    },
                },
                CALENDAR_TYPE: {
                    "deployRequests": {
                        "add": {
                            "url": "/rest/workinghours/1/api/calendar/{serviceDeskId}",
                            "method": "post",
                            "fieldsToIgnore": ["serviceDeskId"],
                        },
                        "modify": {
                            "url": "/rest/workinghours/1/api/calendar/{serviceDeskId}/{id}",
                            "method": "put",
                            "fieldsToIgnore": ["serviceDeskId"],
                        },
                        "remove": {
                            "url": "/rest/workinghours/1/api/calendar/{serviceDeskId}/{id}",
                            "method": "delete",
                            "omitRequestBody": True,
                        },
                    },
                },
                CUSTOMER_PERMISSIONS_TYPE: {
                    "deployRequests": {
                        "modify": {
                            "url": f"{_SERVICEDESK}/settings/requestsecurity",
                            "method": "post",
                            "fieldsToIgnore": ["projectKey"],
                        },
                    },
                },
                OBJECT_SCHEMA_TYPE: {
                    "transformation": {"serviceIdField": "id"},
                    "deployRequests": {
                        "add": {
                            "url": f"{_ASSETS}/objectschema/create",
                            "method": "post",
                            "fieldsToIgnore": ["properties"],
                        },
                        "modify": {
                            "url": f"{_ASSETS}/objectschema/{{id}}",
                            "method": "put",
                            "fieldsToIgnore": ["properties"],
                        },
                        "remove": {
                            "url": f"{_ASSETS}/objectschema/{{id}}",
                            "method": "delete",
                            "omitRequestBody": True,
                        },
                    },
                },
                OBJECT_SCHEMA_STATUS_TYPE: {
                    "transformation": {
                        "deployTypeName": "StatusType",
                        "fieldTypeOverrides": [{"fieldName": "category", "fieldType": "number"}],
                    },
                    "deployRequests": {
                        "add": {
                            "url": f"{_ASSETS}/config/statustype",
                            "method": "post",
                        },
                        "modify": {
                            "url": f"{_ASSETS}/config/statustype/{{id}}",
                            "method": "put",
                        },
                        "remove": {
                            "url": f"{_ASSETS}/config/statustype/{{id}}",
                            "method": "delete",
                            "omitRequestBody": True,
                        },
                    },
                },
                OBJECT_TYPE_TYPE: {
                    "deployRequests": {
                        "add": {
                            "url": f"{_ASSETS}/objecttype/create",
                            "method": "post",
                            "fieldsToIgnore": ["icon"],
                        },
                        "modify": {
                            "url": f"{_ASSETS}/objecttype/{{id}}",
                            "method": "put",
                            "fieldsToIgnore": ["icon"],
                        },
                        "remove": {
                            "url": f"{_ASSETS}/objecttype/{{id}}",
                            "method": "delete",
                            "omitRequestBody": True,
                        },
                    },
                },
            },
        }
    )
