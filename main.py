import logging
import os

import numpy as np
import torch

from bf.utils import box_utils, env, helpers

from priorbox.errors import PriorBoxError
from priorbox.multi_prior_box import build_prior_boxes


def save(path, boxes, variances):
    folder = os.path.dirname(path)
    folder and not os.path.exists(folder) and os.makedirs(folder)

    if path.endswith('.pt'):
        torch.save({'boxes': boxes, 'variances': variances}, path)
    else:
        np.savez(path, boxes=boxes.numpy(), variances=variances.numpy())

    logging.info(f'>> Priors saved to {path}')

def main(args):
    env.init_logger(args)
    cfg = helpers.load_config(args)

    try:
        prior_boxes = build_prior_boxes(**cfg.prior_box)
        boxes, variances = prior_boxes.generate(cfg.img_size, cfg.feature_map_sizes)
    except PriorBoxError as e:
        logging.error(f'XX {type(e).__name__}: {e}')
        raise

    for i, (feature_map_size, num_priors) in enumerate(zip(cfg.feature_map_sizes, prior_boxes.num_priors)):
        layer_w, layer_h = feature_map_size
        logging.info(f'>> layer {i}: {layer_h}x{layer_w}, {num_priors} priors per cell, '
                     f'{layer_h * layer_w * num_priors} boxes')
    logging.info(f'>> Total: {boxes.size(0)} boxes')

    if args.format == 'centroids':
        boxes = box_utils.to_centroids(boxes)

    if args.output:
        save(args.output, boxes, variances)

    return boxes, variances


if __name__ == '__main__':
    parser = helpers.get_default_argparser()
    parser.add_argument('--output', type=str,
                        help='File to save priors to (`.pt` for torch, numpy `.npz` otherwise)')
    parser.add_argument('--format', default='corners', choices=['corners', 'centroids'],
                        help='Box format of the saved priors')
    args = parser.parse_args()

    main(args)
