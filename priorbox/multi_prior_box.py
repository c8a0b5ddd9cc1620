import logging

import torch

from bf.utils.misc_utils import filter_kwargs, update_existing
from priorbox.errors import InvalidConfiguration
from priorbox.layout import shape_of
from priorbox.prior_box import PriorBox


@filter_kwargs
def build_prior_boxes(layers=None,
                      variances=(0.1, 0.1, 0.2, 0.2),
                      flip=True,
                      clip=False,
                      offset=0.5):
    if not layers:
        raise InvalidConfiguration('`layers` should list at least one prior box layer')

    shared = {
        'variances': variances,
        'flip': flip,
        'clip': clip,
        'offset': offset
    }

    prior_boxes = []
    for layer in layers:
        layer = dict(layer)
        update_existing(layer, shared)
        prior_boxes.append(filter_kwargs(PriorBox)(**layer))

    return MultiPriorBox(prior_boxes)


class MultiPriorBox(object):
    def __init__(self, prior_boxes):
        if not prior_boxes:
            raise InvalidConfiguration('At least one prior box layer is required')
        if len(set(len(x.cfg.variances) for x in prior_boxes)) > 1:
            raise InvalidConfiguration('All prior box layers should have the same number of variances')
        self.prior_boxes = list(prior_boxes)

    @property
    def num_priors(self):
        return [x.num_boxes for x in self.prior_boxes]

    def __len__(self):
        return len(self.prior_boxes)

    def generate(self, img_size, feature_map_sizes):
        """
        Args:
            img_size: tuple(width, height)
            feature_map_sizes: list(tuple(width, height)) -> one per layer
        Returns:
            priors: tuple(torch.tensor(:shape [Boxes, 4]) -> boxes,
                          torch.tensor(:shape [Boxes, Variances]) -> variances)
        """
        if len(feature_map_sizes) != len(self.prior_boxes):
            raise InvalidConfiguration(f'Got {len(feature_map_sizes)} feature maps '
                                       f'for {len(self.prior_boxes)} prior box layers')

        boxes = []
        variances = []

        for i, (feature_map_size, prior_box) in enumerate(zip(feature_map_sizes, self.prior_boxes)):
            layer_boxes, layer_variances = prior_box.generate_for_size(img_size, feature_map_size)
            logging.debug(f'>> layer {i}: {layer_boxes.size(0)}x{layer_boxes.size(1)}, '
                          f'{prior_box.num_boxes} priors per cell, {layer_variances.size(0)} boxes')
            boxes.append(layer_boxes.view(-1, 4))
            variances.append(layer_variances)

        return torch.cat(boxes, dim=0), torch.cat(variances, dim=0)

    def generate_from_tensors(self, img, feature_maps):
        """
        Args:
            img: torch.tensor(:shape [Batch, Channels, Height, Width])
            feature_maps: list(torch.tensor(:shape [Batch, Channels, Height, Width]))
        """
        return self.generate(shape_of(img), [shape_of(x) for x in feature_maps])
