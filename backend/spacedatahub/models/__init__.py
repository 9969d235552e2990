from spacedatahub.models.donki import (
    AnalysisRecord as AnalysisRecord,
    EventRecord as EventRecord,
    ImpactRecord as ImpactRecord,
)
from spacedatahub.models.impact import (
    AnalysisKind as AnalysisKind,
    ImpactVerdict as ImpactVerdict,
    TargetBody as TargetBody,
    TargetProfile as TargetProfile,
    TARGET_PROFILES as TARGET_PROFILES,
)
