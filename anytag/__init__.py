"""anytag: highlight and track #hash and @at tags in editable text"""

from .annotator import TagAnnotator, create_annotator
from .buffer import Annotation, TextBuffer
from .errors import UsageError
from .models import AT, HASH, AnnotatedText, Marker, TagConfig, TagRange
from .models.extractors import TagScanner

__version__ = "0.1.0"

__all__ = ['TagAnnotator', 'create_annotator', 'Annotation', 'TextBuffer', 'UsageError',
           'Marker', 'HASH', 'AT', 'TagConfig', 'TagRange', 'AnnotatedText', 'TagScanner']
