class PriorBoxError(ValueError):
    pass

class InvalidConfiguration(PriorBoxError):
    pass

class DegenerateShape(PriorBoxError):
    pass

class DegenerateAspectRatio(PriorBoxError):
    pass
