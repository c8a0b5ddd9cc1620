import logging
from collections import namedtuple

from priorbox.errors import DegenerateShape


GridShape = namedtuple('GridShape', ['layer_width', 'layer_height'])
ImageShape = namedtuple('ImageShape', ['img_width', 'img_height'])
PriorLayout = namedtuple('PriorLayout', ['step_width', 'step_height', 'num_priors'])


def shape_of(array):
    """
    Args:
        array: torch.tensor or np.ndarray(:shape [Batch, Channels, Height, Width])
    Returns:
        size: tuple(width, height)
    """
    shape = array.shape
    if len(shape) != 4:
        raise DegenerateShape(f'Expected NCHW shape, got {tuple(shape)}')
    return int(shape[3]), int(shape[2])

def plan(cfg, grid, image):
    """
    Args:
        cfg: PriorBoxConfig
        grid: GridShape
        image: ImageShape
    Returns:
        layout: PriorLayout
    """
    grid = GridShape(*grid)
    image = ImageShape(*image)

    if image.img_width <= 0 or image.img_height <= 0:
        raise DegenerateShape(f'Image size should be positive, got {tuple(image)}')

    if grid.layer_width < 0 or grid.layer_height < 0:
        raise DegenerateShape(f'Feature map size should not be negative, got {tuple(grid)}')

    if cfg.step_w != 0:
        step_width = cfg.step_w
    elif grid.layer_width == 0:
        raise DegenerateShape('Can not derive horizontal step from a feature map of zero width')
    else:
        step_width = image.img_width / grid.layer_width

    if cfg.step_h != 0:
        step_height = cfg.step_h
    elif grid.layer_height == 0:
        raise DegenerateShape('Can not derive vertical step from a feature map of zero height')
    else:
        step_height = image.img_height / grid.layer_height

    layout = PriorLayout(step_width, step_height, cfg.num_priors)
    logging.debug(f'>> Prior layout for {tuple(grid)} on {tuple(image)}: {layout}')

    return layout

def strides(layer_width, num_priors):
    return layer_width * num_priors * 4, num_priors * 4, 4, 1

def flat_offset(h, w, prior_index, coord, layer_width, num_priors):
    """
    Row-major offset of [h, w, prior_index, coord] in a
    [Height, Width, Priors, 4] buffer
    """
    stride_h, stride_w, stride_p, stride_c = strides(layer_width, num_priors)
    return h * stride_h + w * stride_w + prior_index * stride_p + coord * stride_c
