from internest.schemas.common import ErrorResponse, FieldError, MessageResponse, Pagination
from internest.schemas.export import FeatureExportResponse, FeatureVector, RawExportResponse, RawPreferenceRow
from internest.schemas.internship import InternshipFilterEcho, InternshipListResponse, InternshipResponse
from internest.schemas.preference import (
	PreferenceCreateResponse,
	PreferenceFields,
	PreferenceListResponse,
	PreferenceOut,
	PreferenceResponse,
	PreferenceSubmission,
	PreferenceUpdateResponse,
)
from internest.schemas.stats import StatsOverview, StatsResponse

__all__ = [
	"ErrorResponse",
	"FieldError",
	"MessageResponse",
	"Pagination",
	"FeatureExportResponse",
	"FeatureVector",
	"RawExportResponse",
	"RawPreferenceRow",
	"InternshipFilterEcho",
	"InternshipListResponse",
	"InternshipResponse",
	"PreferenceCreateResponse",
	"PreferenceFields",
	"PreferenceListResponse",
	"PreferenceOut",
	"PreferenceResponse",
	"PreferenceSubmission",
	"PreferenceUpdateResponse",
	"StatsOverview",
	"StatsResponse",
]
