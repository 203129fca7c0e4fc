"""Update-type color map."""

from helmfile_next.models import UpdateType

UPDATE_COLORS: dict[UpdateType, str] = {
    UpdateType.MAJOR: "red bold",
    UpdateType.MINOR: "yellow",
    UpdateType.PATCH: "green",
    UpdateType.UP_TO_DATE: "dim",
    UpdateType.UNKNOWN: "dim",
}

STATUS_UPDATE = "⬆️"
STATUS_CURRENT = "✅"


def styled_update_type(update_type: UpdateType) -> str:
    color = UPDATE_COLORS.get(update_type, "white")
    return f"[{color}]{update_type.value}[/{color}]"
