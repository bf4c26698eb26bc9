"""Domain enumerations for the document service.

Enums represent fixed sets of domain values (e.g. document status).
"""

from enum import Enum


class DocumentStatus(str, Enum):
    """Document lifecycle status.

    Draft is the initial status. Final is terminal-forward: a finalized
    document can be sent to the client backend and receive an access code,
    but never returns to draft.
    """

    DRAFT = "draft"
    FINAL = "final"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings.

        Returns:
            List of status values (e.g. ['draft', 'final']).
        """
        return [s.value for s in cls]
