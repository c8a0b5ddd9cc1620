input_size = (512, 512)

feature_map_sizes = [(64, 64), (32, 32), (16, 16), (8, 8), (4, 4), (2, 2), (1, 1)]

prior_box = {
    'variances': [0.1, 0.1, 0.2, 0.2],
    'flip': True,
    'clip': False,
    'layers': [
        {'min_sizes': [20.48], 'max_sizes': [51.2], 'aspect_ratios': [2.], 'step': 8},
        {'min_sizes': [51.2], 'max_sizes': [133.12], 'aspect_ratios': [2., 3.], 'step': 16},
        {'min_sizes': [133.12], 'max_sizes': [215.04], 'aspect_ratios': [2., 3.], 'step': 32},
        {'min_sizes': [215.04], 'max_sizes': [296.96], 'aspect_ratios': [2., 3.], 'step': 64},
        {'min_sizes': [296.96], 'max_sizes': [378.88], 'aspect_ratios': [2., 3.], 'step': 128},
        {'min_sizes': [378.88], 'max_sizes': [460.8], 'aspect_ratios': [2.], 'step': 256},
        {'min_sizes': [460.8], 'max_sizes': [542.72], 'aspect_ratios': [2.], 'step': 512},
    ]
}
