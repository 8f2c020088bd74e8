"""
Exporter registration.

Adds the exporters of every active component to the host's exporter
mapping. Keys already claimed by another registrant are left alone, so
exporters shipped by the platform itself take precedence.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Type

from bpdx.constants import EXPORTER_KEY_PREFIX
from bpdx.host.context import HostContext
from bpdx.logging import get_logger
from .activity import ActivityExporter
from .base_exporter import BaseExporter
from .friends import (
    FriendsExporter,
    FriendsPendingReceivedRequestsExporter,
    FriendsPendingSentRequestsExporter,
)
from .groups import (
    GroupMembershipsExporter,
    GroupPendingReceivedInvitationsExporter,
    GroupPendingRequestsExporter,
    GroupPendingSentInvitationsExporter,
)
from .hooks import ExportHooks
from .messages import MessagesExporter
from .models import ExportPage
from .notifications import NotificationsExporter
from .settings import SettingsExporter
from .xprofile import XProfileExporter

ExporterCallback = Callable[..., ExportPage]

# Registration order
EXPORTER_CLASSES: List[Type[BaseExporter]] = [
    SettingsExporter,
    ActivityExporter,
    XProfileExporter,
    MessagesExporter,
    GroupMembershipsExporter,
    GroupPendingRequestsExporter,
    GroupPendingReceivedInvitationsExporter,
    GroupPendingSentInvitationsExporter,
    FriendsExporter,
    FriendsPendingSentRequestsExporter,
    FriendsPendingReceivedRequestsExporter,
    NotificationsExporter,
]


@dataclass(frozen=True)
class RegisteredExporter:
    """Entry of the host's exporter mapping"""

    friendly_name: str
    callback: ExporterCallback


def register_exporters(
    exporters: Dict[str, RegisteredExporter],
    host: HostContext,
    hooks: Optional[ExportHooks] = None,
    key_prefix: str = EXPORTER_KEY_PREFIX,
) -> Dict[str, RegisteredExporter]:
    """Register the exporters of all active components

    Args:
        exporters: Host mapping of exporter key to registration, updated in place
        host: Host capability handed to every exporter
        hooks: Shared formatter and enricher registry
        key_prefix: Prefix applied to every exporter key

    Returns:
        The updated mapping
    """
    hooks = hooks or ExportHooks()
    logger = get_logger("bpdx.exporters.registry")

    for exporter_class in EXPORTER_CLASSES:
        key = f"{key_prefix}{exporter_class.key}"
        if not host.is_component_active(exporter_class.component):
            logger.debug(f"Skipping {key}: component '{exporter_class.component}' inactive")
            continue
        if key in exporters:
            logger.debug(f"Skipping {key}: already registered")
            continue

        exporter = exporter_class(host, hooks)
        exporters[key] = RegisteredExporter(
            friendly_name=host.translate(exporter_class.friendly_name),
            callback=exporter,
        )
        logger.debug(f"Registered exporter {key}")

    return exporters
