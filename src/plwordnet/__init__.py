"""plwordnet — streaming loader and read-only query layer for plWordNet XML."""

__version__ = "0.1.0"

from plwordnet.config import (
    LoaderConfig as LoaderConfig,
    load_config as load_config,
)
from plwordnet.exceptions import (
    ConfigError as ConfigError,
    InvalidAttributeValueError as InvalidAttributeValueError,
    LoadIOError as LoadIOError,
    MalformedXmlError as MalformedXmlError,
    MissingRootError as MissingRootError,
    PlWordNetError as PlWordNetError,
    UnexpectedElementError as UnexpectedElementError,
)
from plwordnet.graph import LexicalGraph as LexicalGraph
from plwordnet.models import (
    Language as Language,
    LexicalRelation as LexicalRelation,
    LexicalUnit as LexicalUnit,
    Metadata as Metadata,
    RelationType as RelationType,
    RelationTypeTest as RelationTypeTest,
    Synset as Synset,
    SynsetRelation as SynsetRelation,
)
from plwordnet.parser import (
    load as load,
    parse_events as parse_events,
)
from plwordnet.views import (
    LexicalRelationView as LexicalRelationView,
    LexicalUnitView as LexicalUnitView,
    RelationTypeView as RelationTypeView,
    SynsetRelationView as SynsetRelationView,
    SynsetView as SynsetView,
)

__all__ = [
    # Entry points
    "LexicalGraph",
    "load",
    "parse_events",
    # Configuration
    "LoaderConfig",
    "load_config",
    # Models
    "Language",
    "LexicalUnit",
    "Synset",
    "RelationType",
    "RelationTypeTest",
    "LexicalRelation",
    "SynsetRelation",
    "Metadata",
    # Views
    "LexicalUnitView",
    "SynsetView",
    "RelationTypeView",
    "LexicalRelationView",
    "SynsetRelationView",
    # Exceptions
    "PlWordNetError",
    "LoadIOError",
    "MalformedXmlError",
    "InvalidAttributeValueError",
    "MissingRootError",
    "UnexpectedElementError",
    "ConfigError",
]
