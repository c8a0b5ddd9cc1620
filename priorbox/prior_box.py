import functools
import math

import torch

from priorbox.aspect_ratios import is_close
from priorbox.errors import InvalidConfiguration
from priorbox.layout import GridShape, ImageShape, plan, shape_of, strides
from priorbox.postprocessor import fill_variances, postprocess
from priorbox.prior_box_config import PriorBoxConfig


def prior_sizes(cfg):
    """
    Box sizes of a single cell in emission order: for every min size
    the square min prior, the square min/max prior (if max sizes are set),
    then one prior per non-unit aspect ratio.
    Args:
        cfg: PriorBoxConfig
    Returns:
        sizes: list(tuple(width, height))
    """
    sizes = []

    for s, min_size in enumerate(cfg.min_sizes):
        sizes.append((min_size, min_size))

        if cfg.max_sizes:
            size = math.sqrt(min_size * cfg.max_sizes[s])
            sizes.append((size, size))

        for ar in cfg.expanded_aspect_ratios:
            if is_close(ar, 1.):
                continue
            sizes.append((min_size * math.sqrt(ar), min_size / math.sqrt(ar)))

    if len(sizes) != cfg.num_priors:
        raise InvalidConfiguration(f'Aspect ratios {cfg.expanded_aspect_ratios} produce {len(sizes)} priors '
                                   f'per cell instead of {cfg.num_priors}')

    return sizes

def generate_priors(cfg, grid, image, layout, sizes=None):
    """
    Args:
        cfg: PriorBoxConfig
        grid: GridShape
        image: ImageShape
        layout: PriorLayout
        sizes: list(tuple(width, height)) -> precomputed `prior_sizes(cfg)`
    Returns:
        boxes: torch.tensor(:shape [Height, Width, Priors, 4]), unclipped minmax boxes
    """
    layer_w, layer_h = GridShape(*grid)
    img_w, img_h = ImageShape(*image)
    num_priors = layout.num_priors

    if sizes is None:
        sizes = prior_sizes(cfg)

    hws = torch.tensor(sizes, dtype=torch.float64).view(1, 1, num_priors, 2)
    img_wh = torch.tensor([img_w, img_h], dtype=torch.float64)

    xs = (torch.arange(layer_w, dtype=torch.float64) + cfg.offset) * layout.step_width
    ys = (torch.arange(layer_h, dtype=torch.float64) + cfg.offset) * layout.step_height
    y_grid, x_grid = torch.meshgrid(ys, xs, indexing='ij')
    centers = torch.stack([x_grid, y_grid], dim=-1).unsqueeze_(2)

    boxes = torch.cat([(centers - hws / 2.) / img_wh, (centers + hws / 2.) / img_wh], dim=-1)

    flat = boxes.reshape(-1)
    boxes = torch.as_strided(flat, (layer_h, layer_w, num_priors, 4), strides(layer_w, num_priors))

    return boxes.to(torch.float32)


class PriorBox(object):
    def __init__(self,
                 min_sizes,
                 max_sizes=(),
                 aspect_ratios=(),
                 variances=(0.1, 0.1, 0.2, 0.2),
                 flip=False,
                 clip=False,
                 step=None,
                 step_w=0.,
                 step_h=0.,
                 offset=0.5):
        if step is not None:
            step_w = step_h = step

        self.cfg = PriorBoxConfig(min_sizes,
                                  max_sizes=max_sizes,
                                  aspect_ratios=aspect_ratios,
                                  variances=variances,
                                  flip=flip,
                                  clip=clip,
                                  step_w=step_w,
                                  step_h=step_h,
                                  offset=offset)
        self.num_boxes = self.cfg.num_priors
        self.sizes = prior_sizes(self.cfg)

    @functools.lru_cache()
    def _generate_priors(self, img_size, feature_map_size):
        layout = plan(self.cfg, feature_map_size, img_size)

        boxes = generate_priors(self.cfg, feature_map_size, img_size, layout, sizes=self.sizes)

        if not torch.isfinite(boxes).all():
            raise InvalidConfiguration(f'Non-finite prior coordinates for image {img_size} '
                                       f'and feature map {feature_map_size}')

        boxes = postprocess(boxes, self.cfg)

        variances = fill_variances(boxes.numel() // 4, self.cfg.variances)

        return boxes, variances

    def generate_for_size(self, img_size, feature_map_size):
        """
        Args:
            img_size: tuple(width, height)
            feature_map_size: tuple(width, height)
        Returns:
            priors: tuple(torch.tensor(:shape [Height, Width, Priors, 4]) -> boxes,
                          torch.tensor(:shape [Height * Width * Priors, Variances]) -> variances)
        """
        boxes, variances = self._generate_priors(tuple(img_size), tuple(feature_map_size))
        return boxes.clone(), variances.clone()

    def generate(self, img, feature_map):
        """
        Args:
            img: torch.tensor(:shape [Batch, Channels, Height, Width])
            feature_map: torch.tensor(:shape [Batch, Channels, Height, Width])
        Returns:
            priors: see `generate_for_size`
        """
        return self.generate_for_size(shape_of(img), shape_of(feature_map))

    def __repr__(self):
        return f'{type(self).__name__}({self.cfg!r})'
