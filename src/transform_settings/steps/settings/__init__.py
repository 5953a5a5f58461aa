"""Steps de settings: load, update e encode."""

from .encode import SettingsEncodeStep
from .load import SettingsLoadStep
from .update import SettingsUpdateStep

__all__ = ["SettingsEncodeStep", "SettingsLoadStep", "SettingsUpdateStep", "default_steps"]


def default_steps():
    """Cadeia padrão: load → update → encode."""
    return [SettingsLoadStep(), SettingsUpdateStep(), SettingsEncodeStep()]
