from internest.models.preference import Preference
from internest.models.search_log import SearchLog

__all__ = [
	"Preference",
	"SearchLog",
]
