from .Illuminant import Illuminant, STANDARD_OBSERVER
