"""Write the identifier assigned by the service back onto a deployed instance."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from jsmdeploy.constants import QUEUE_TYPE
from jsmdeploy.domain.model import canonical_number_string, is_number

if TYPE_CHECKING:
    from jsmdeploy.domain.model import InstanceElement

ResponseValue = Mapping[str, object]
ServiceIdSetter = Callable[["InstanceElement", str, ResponseValue | None], None]


def default_service_id_setter(
    instance: InstanceElement,
    service_id_field: str,
    response: ResponseValue | None,
) -> None:
    if response is None or service_id_field not in response:
        return
    instance.value[service_id_field] = response[service_id_field]


def queue_service_id_setter(
    instance: InstanceElement,
    service_id_field: str,
    response: ResponseValue | None,
) -> None:
    """Queue ids are declared as strings but the service answers with numbers."""

    if response is None or service_id_field not in response:
        return
    service_field_value = response[service_id_field]
    if is_number(service_field_value):
        instance.value[service_id_field] = canonical_number_string(service_field_value)
    else:
        instance.value[service_id_field] = service_field_value


_SERVICE_ID_SETTERS: Mapping[str, ServiceIdSetter] = MappingProxyType(
    {QUEUE_TYPE: queue_service_id_setter}
)


def select_service_id_setter(type_name: str) -> ServiceIdSetter:
    return _SERVICE_ID_SETTERS.get(type_name, default_service_id_setter)
