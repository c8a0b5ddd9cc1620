import math

from priorbox.aspect_ratios import expand_aspect_ratios
from priorbox.errors import DegenerateAspectRatio, InvalidConfiguration


def _floats(values, name):
    try:
        values = tuple(float(x) for x in values)
    except (TypeError, ValueError):
        raise InvalidConfiguration(f'`{name}` should be a sequence of numbers, got {values!r}')
    if not all(math.isfinite(x) for x in values):
        raise InvalidConfiguration(f'`{name}` should contain only finite values, got {values}')
    return values

def _float(value, name):
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidConfiguration(f'`{name}` should be a number, got {value!r}')
    if not math.isfinite(value):
        raise InvalidConfiguration(f'`{name}` should be finite, got {value}')
    return value


class PriorBoxConfig(object):
    """
    Validated prior box layer configuration. Sequences are stored as tuples
    and checked once here, generation code relies on these checks.
    """
    def __init__(self,
                 min_sizes,
                 max_sizes=(),
                 aspect_ratios=(),
                 variances=(0.1, 0.1, 0.2, 0.2),
                 flip=False,
                 clip=False,
                 step_w=0.,
                 step_h=0.,
                 offset=0.5):
        self.min_sizes = _floats(min_sizes, 'min_sizes')
        self.max_sizes = _floats(() if max_sizes is None else max_sizes, 'max_sizes')
        self.variances = _floats(variances, 'variances')
        self.flip = bool(flip)
        self.clip = bool(clip)
        self.step_w = _float(step_w, 'step_w')
        self.step_h = _float(step_h, 'step_h')
        self.offset = _float(offset, 'offset')

        try:
            self.aspect_ratios = tuple(float(x) for x in aspect_ratios)
        except (TypeError, ValueError):
            raise InvalidConfiguration(f'`aspect_ratios` should be a sequence of numbers, got {aspect_ratios!r}')

        self._validate()

        self.expanded_aspect_ratios = tuple(expand_aspect_ratios(self.aspect_ratios, self.flip))
        self.num_priors = len(self.min_sizes) * len(self.expanded_aspect_ratios) + len(self.max_sizes)

    def _validate(self):
        if not self.min_sizes:
            raise InvalidConfiguration('`min_sizes` should not be empty')

        for min_size in self.min_sizes:
            if min_size <= 0:
                raise InvalidConfiguration(f'Min size should be greater than 0, got {min_size}')

        if self.max_sizes:
            if len(self.max_sizes) != len(self.min_sizes):
                raise InvalidConfiguration(f'`max_sizes` should have the same length as `min_sizes`: '
                                           f'{len(self.max_sizes)} != {len(self.min_sizes)}')
            for min_size, max_size in zip(self.min_sizes, self.max_sizes):
                if max_size <= min_size:
                    raise InvalidConfiguration(f'Max size should be greater than min size: {max_size} <= {min_size}')

        for ar in self.aspect_ratios:
            if not math.isfinite(ar) or ar <= 0:
                raise DegenerateAspectRatio(f'Aspect ratio should be a positive finite number, got {ar}')

        if not self.variances:
            raise InvalidConfiguration('`variances` should not be empty')

        for v in self.variances:
            if v <= 0:
                raise InvalidConfiguration(f'Variances must be greater than 0, got {v}')

        if self.step_w < 0 or self.step_h < 0:
            raise InvalidConfiguration(f'Steps should not be negative, got ({self.step_w}, {self.step_h})')

    def __setattr__(self, name, value):
        if 'num_priors' in self.__dict__:
            raise AttributeError(f'{type(self).__name__} is immutable')
        super(PriorBoxConfig, self).__setattr__(name, value)

    def __repr__(self):
        fields = ', '.join(f'{k}={getattr(self, k)!r}' for k in ('min_sizes', 'max_sizes', 'aspect_ratios',
                                                                 'variances', 'flip', 'clip',
                                                                 'step_w', 'step_h', 'offset'))
        return f'{type(self).__name__}({fields})'
