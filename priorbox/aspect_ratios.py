from priorbox.errors import DegenerateAspectRatio


EPS = 1e-6


def is_close(a, b, eps=EPS):
    return abs(a - b) < eps

def expand_aspect_ratios(aspect_ratios, flip=False):
    """
    Ratio 1.0 always comes first, the rest keep their input order.
    Args:
        aspect_ratios: list(float)
        flip: bool -> append 1 / ratio right after every newly added ratio
    Returns:
        expanded: list(float)
    """
    expanded = [1.]

    for ar in aspect_ratios:
        if any(is_close(ar, x) for x in expanded):
            continue

        expanded.append(ar)

        if flip:
            if ar == 0:
                raise DegenerateAspectRatio('Aspect ratio 0 can not be flipped')
            # reciprocal is not checked against the list
            expanded.append(1. / ar)

    return expanded
