# Core module exports
from lexis.core.config import settings, get_settings
from lexis.core.languages import LanguageID, compare_languages, resolve_language
from lexis.core.logging import (
    configure_logging,
    configure_from_settings,
    get_logger,
    bind_context,
    clear_context,
    unbind_context,
    feature_logger,
    importer_logger,
    language_logger,
)
