"""Mocked environment prerequisite checks for the wizard.

None of the checks here talk to a cloud provider. They return canned
answers so the wizard flow can be exercised end to end.
"""

import logging
import os
from dataclasses import fields
from typing import Any, Callable, Dict, List, Optional

from .catalog import DEFAULT_REGION
from .models import PrerequisitesCheck

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_ID = "your-project-id"

REQUIRED_APIS = [
    "container.googleapis.com",
    "compute.googleapis.com",
    "iam.googleapis.com",
    "file.googleapis.com",
    "storage.googleapis.com",
]

REQUIRED_IAM_ROLES = [
    "roles/container.admin",
    "roles/compute.admin",
    "roles/iam.serviceAccountAdmin",
]


class PrerequisitesManager:
    """Runs the prerequisite checks and the matching auto-fix actions.

    Project and region come from the constructor or, when omitted, from the
    GOOGLE_CLOUD_PROJECT and GOOGLE_CLOUD_REGION environment variables at
    check time.
    """

    def __init__(self, project_id: Optional[str] = None, region: Optional[str] = None):
        self._configured_project_id = project_id
        self._configured_region = region
        self.project_id = ""
        self.region = ""

    def check_prerequisites(self) -> PrerequisitesCheck:
        """Run every check and merge the partial results in order."""
        checks: List[Callable[[], Dict[str, Any]]] = [
            self._check_project_id,
            self._check_apis,
            self._check_iam_roles,
            self._check_gcloud_cli,
            self._check_region_config,
            self._check_billing,
        ]
        partials = [check() for check in checks]
        result = self._aggregate_results(partials)
        logger.info(
            "Prerequisites checked for project %s: ready=%s", result.project_id, result.is_ready
        )
        return result

    def auto_fix_prerequisites(self) -> List[str]:
        """Apply the fix for every failing check.

        Returns:
            Human-readable descriptions of the actions taken
        """
        issues = self.check_prerequisites()
        actions = []

        if not issues.api_enabled:
            actions.append(self._enable_required_apis())

        if issues.iam_roles:
            actions.append(self._setup_iam_roles(issues.iam_roles))

        if not issues.gcloud_installed:
            actions.append(self._install_gcloud_cli())

        if not issues.billing_enabled:
            actions.append(self._enable_billing())

        return actions

    def _check_project_id(self) -> Dict[str, Any]:
        self.project_id = (
            self._configured_project_id
            or os.environ.get("GOOGLE_CLOUD_PROJECT")
            or DEFAULT_PROJECT_ID
        )
        return {"project_id": self.project_id}

    def _check_apis(self) -> Dict[str, Any]:
        enabled_apis = self._get_enabled_apis()
        return {"api_enabled": all(api in enabled_apis for api in REQUIRED_APIS)}

    def _check_iam_roles(self) -> Dict[str, Any]:
        user_roles = self._get_user_roles()
        return {"iam_roles": [role for role in REQUIRED_IAM_ROLES if role not in user_roles]}

    def _check_gcloud_cli(self) -> Dict[str, Any]:
        return {"gcloud_installed": self._check_gcloud_installation()}

    def _check_region_config(self) -> Dict[str, Any]:
        self.region = (
            self._configured_region or os.environ.get("GOOGLE_CLOUD_REGION") or DEFAULT_REGION
        )
        return {"region_set": bool(self.region)}

    def _check_billing(self) -> Dict[str, Any]:
        return {"billing_enabled": self._check_billing_status()}

    def _aggregate_results(self, partials: List[Dict[str, Any]]) -> PrerequisitesCheck:
        defaults = PrerequisitesCheck()
        merged = {f.name: getattr(defaults, f.name) for f in fields(PrerequisitesCheck)}
        # Later checks win on overlapping keys
        for partial in partials:
            merged.update(partial)
        return PrerequisitesCheck(**merged)

    # Canned answers standing in for cloud API calls
    def _get_enabled_apis(self) -> List[str]:
        return ["container.googleapis.com", "compute.googleapis.com"]

    def _get_user_roles(self) -> List[str]:
        return ["roles/container.admin"]

    def _check_gcloud_installation(self) -> bool:
        return True

    def _check_billing_status(self) -> bool:
        return True

    def _enable_required_apis(self) -> str:
        message = f"Enabling required APIs: {', '.join(REQUIRED_APIS)}"
        logger.info(message)
        return message

    def _setup_iam_roles(self, roles: List[str]) -> str:
        message = f"Setting up IAM roles: {', '.join(roles)}"
        logger.info(message)
        return message

    def _install_gcloud_cli(self) -> str:
        message = "Installing gcloud CLI"
        logger.info(message)
        return message

    def _enable_billing(self) -> str:
        message = f"Enabling billing for project {self.project_id}"
        logger.info(message)
        return message
