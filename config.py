# SSD300, VGG16 feature maps
input_size = (300, 300)

feature_map_sizes = [(38, 38), (19, 19), (10, 10), (5, 5), (3, 3), (1, 1)]

prior_box = {
    'variances': [0.1, 0.1, 0.2, 0.2],
    'flip': True,
    'clip': False,
    'offset': 0.5,
    'layers': [
        {'min_sizes': [30], 'max_sizes': [60], 'aspect_ratios': [2.], 'step': 8},
        {'min_sizes': [60], 'max_sizes': [111], 'aspect_ratios': [2., 3.], 'step': 16},
        {'min_sizes': [111], 'max_sizes': [162], 'aspect_ratios': [2., 3.], 'step': 32},
        {'min_sizes': [162], 'max_sizes': [213], 'aspect_ratios': [2., 3.], 'step': 64},
        {'min_sizes': [213], 'max_sizes': [264], 'aspect_ratios': [2.], 'step': 100},
        {'min_sizes': [264], 'max_sizes': [315], 'aspect_ratios': [2.], 'step': 300},
    ]
}
