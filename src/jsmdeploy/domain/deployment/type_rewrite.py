"""Re-type instances into the shape the deploy engine serializes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from jsmdeploy.domain.model import InstanceElement, ObjectType, convert_primitive

if TYPE_CHECKING:
    from jsmdeploy.config.api_definitions import ApiDefinitions
    from jsmdeploy.domain.model import Element


def replace_instance_type_for_deploy(
    instance: InstanceElement,
    config: ApiDefinitions,
) -> InstanceElement:
    """Return a copy of ``instance`` declared with its deployable type.

    The deployable type is named after ``transformation.deploy_type_name`` when
    the type definition sets one and declares the configured field type
    overrides. Only overridden fields have their values converted; the input
    instance is left untouched.
    """

    type_name = instance.elem_id.type_name
    adapter = instance.elem_id.adapter
    type_definition = config.types.get(type_name)
    if type_definition is None:
        return instance.retyped(ObjectType.named(type_name, adapter=adapter), dict(instance.value))

    transformation = type_definition.transformation
    overrides = {
        override.field_name: override.field_type
        for override in transformation.field_type_overrides
    }
    deploy_type = ObjectType.named(
        transformation.deploy_type_name or type_name,
        adapter=adapter,
        field_types=overrides,
    )
    value = {
        key: convert_primitive(item, overrides[key]) if key in overrides else item
        for key, item in instance.value.items()
    }
    return instance.retyped(deploy_type, value)


def replace_element_type_for_deploy(element: Element, config: ApiDefinitions) -> Element:
    """Re-type ``element`` when it is an instance; other elements pass through."""

    if isinstance(element, InstanceElement):
        return replace_instance_type_for_deploy(element, config)
    return element
