import argparse
import os

import numpy as np
import pytest
import torch

import main
from bf.utils import helpers
from priorbox.errors import InvalidConfiguration

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

CONFIG = '''
input_size = (300, 300)
feature_map_sizes = [(2, 2)]
prior_box = {
    'variances': [0.1, 0.1, 0.2, 0.2],
    'flip': True,
    'layers': [{'min_sizes': [60], 'aspect_ratios': [2.]}],
}
'''


def _args(config, output=None, format='corners'):
    return argparse.Namespace(config=str(config), debug=True, output=output, format=format)

@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / 'config.py'
    path.write_text(CONFIG)
    return path

def test_load_config(config_path):
    cfg = helpers.load_config(_args(config_path))
    assert cfg.img_size == (300, 300)
    assert cfg.feature_map_sizes == [(2, 2)]
    assert cfg.missing_key == {}

def test_missing_config(tmp_path):
    with pytest.raises(SystemExit):
        helpers.load_config(_args(tmp_path / 'nope.py'))

def test_main_saves_npz(config_path, tmp_path):
    output = str(tmp_path / 'out' / 'priors.npz')
    boxes, variances = main.main(_args(config_path, output=output))

    assert boxes.size() == (12, 4)
    saved = np.load(output)
    np.testing.assert_array_equal(saved['boxes'], boxes.numpy())
    np.testing.assert_array_equal(saved['variances'], variances.numpy())
    np.testing.assert_allclose(saved['boxes'][0], [0.15, 0.15, 0.35, 0.35], rtol=1e-6)

def test_main_saves_torch_centroids(config_path, tmp_path):
    output = str(tmp_path / 'priors.pt')
    boxes, _ = main.main(_args(config_path, output=output, format='centroids'))

    saved = torch.load(output)
    assert torch.equal(saved['boxes'], boxes)
    torch.testing.assert_close(boxes[0], torch.tensor([0.25, 0.25, 0.2, 0.2]))

def test_main_propagates_configuration_errors(tmp_path):
    path = tmp_path / 'config.py'
    path.write_text(CONFIG.replace("'min_sizes': [60]", "'min_sizes': []"))
    with pytest.raises(InvalidConfiguration):
        main.main(_args(path))

@pytest.mark.parametrize('name', ['config.py', 'samples/ssd512_coco.py', 'samples/ssd_mobilenet_300_voc.py'])
def test_shipped_configs(name):
    boxes, variances = main.main(_args(os.path.join(ROOT, name)))
    assert boxes.size(0) == variances.size(0)
    assert torch.isfinite(boxes).all()

def test_ssd300_prior_count():
    boxes, _ = main.main(_args(os.path.join(ROOT, 'config.py')))
    assert boxes.size() == (8732, 4)

def test_main_without_prior_box_section(tmp_path):
    path = tmp_path / 'config.py'
    path.write_text("input_size = (300, 300)\nfeature_map_sizes = [(2, 2)]\n")
    with pytest.raises(InvalidConfiguration):
        main.main(_args(path))
