import numpy as np
import torch

from bf.utils.box_utils import to_centroids, to_corners


def test_to_centroids():
    boxes = torch.tensor([[0.15, 0.15, 0.35, 0.35]])
    torch.testing.assert_close(to_centroids(boxes), torch.tensor([[0.25, 0.25, 0.2, 0.2]]))

def test_to_corners_inverts_to_centroids():
    boxes = torch.tensor([[0.1, 0.2, 0.5, 0.9], [0., 0., 1., 1.]])
    torch.testing.assert_close(to_corners(to_centroids(boxes)), boxes)

def test_numpy_input():
    boxes = np.array([[0.15, 0.15, 0.35, 0.35]], dtype=np.float32)
    result = to_centroids(boxes)
    assert isinstance(result, np.ndarray)
    np.testing.assert_allclose(result, [[0.25, 0.25, 0.2, 0.2]], rtol=1e-6)
