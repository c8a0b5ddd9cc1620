import torch


def clip_boxes(boxes):
    """
    Args:
        boxes: torch.tensor(:shape [...Boxes, 4])
    Returns:
        boxes: the same tensor clipped in place to [0, 1]
    """
    return boxes.clamp_(min=0., max=1.)

def fill_variances(total_box_count, variances):
    """
    Args:
        total_box_count: int
        variances: list(float)
    Returns:
        variances: torch.tensor(:shape [Boxes, Variances])
    """
    return torch.tensor(variances, dtype=torch.float32).repeat(total_box_count, 1)

def postprocess(boxes, cfg):
    if cfg.clip:
        clip_boxes(boxes)
    return boxes
