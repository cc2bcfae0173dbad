"""Adapter-wide names for Jira Service Management and Assets types."""

from __future__ import annotations

from typing import Final

JIRA: Final[str] = "jira"

QUEUE_TYPE: Final[str] = "Queue"
REQUEST_TYPE_TYPE: Final[str] = "RequestType"
PORTAL_GROUP_TYPE: Final[str] = "PortalGroup"
CALENDAR_TYPE: Final[str] = "Calendar"
CUSTOMER_PERMISSIONS_TYPE: Final[str] = "CustomerPermissions"

OBJECT_SCHEMA_TYPE: Final[str] = "ObjectSchema"
OBJECT_SCHEMA_STATUS_TYPE: Final[str] = "ObjectSchemaStatus"
OBJECT_TYPE_TYPE: Final[str] = "ObjectType"

WORKSPACE_ID_URL_VAR: Final[str] = "workspaceId"
