import functools

import numpy as np
import torch


def to_torch(func):
    @functools.wraps(func)
    def wrapped_function(*args, **kwargs):
        if isinstance(args[0], np.ndarray):
            return func(*[torch.from_numpy(x) for x in args], **kwargs).numpy()
        return func(*args, **kwargs)
    return wrapped_function

@to_torch
def to_corners(box):
    """
    Args:
        box: torch.tensor(:shape [...Boxes, 4]) -> (cx, cy, w, h)
    Returns:
        minmax: torch.tensor(:shape [...Boxes, 4]) -> (xmin, ymin, xmax, ymax)
    """
    return torch.cat([box[..., :2] - box[..., 2:] / 2, box[..., :2] + box[..., 2:] / 2], dim=-1)

@to_torch
def to_centroids(box):
    """
    Args:
        box: torch.tensor(:shape [...Boxes, 4]) -> (xmin, ymin, xmax, ymax)
    Returns:
        centroids: torch.tensor(:shape [...Boxes, 4]) -> (cx, cy, w, h)
    """
    return torch.cat([(box[..., 2:] + box[..., :2]) / 2, box[..., 2:] - box[..., :2]], dim=-1)
