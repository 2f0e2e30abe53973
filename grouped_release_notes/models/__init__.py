from .commit import ClassifiedCommit, CommitDetail, RawCommit
from .release_note import LinkSection, ReleaseNote, Section
from .repository import Repository
from .tag import Tag, TagRange

__all__ = [
	"Tag",
	"TagRange",
	"RawCommit",
	"CommitDetail",
	"ClassifiedCommit",
	"Repository",
	"ReleaseNote",
	"Section",
	"LinkSection",
]
