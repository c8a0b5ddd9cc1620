input_size = (300, 300)

# steps are derived from the feature map sizes
feature_map_sizes = [(19, 19), (10, 10), (5, 5), (3, 3), (2, 2), (1, 1)]

prior_box = {
    'variances': [0.1, 0.1, 0.2, 0.2],
    'flip': True,
    'clip': True,
    'layers': [
        {'min_sizes': [60.], 'aspect_ratios': [2.]},
        {'min_sizes': [105.], 'max_sizes': [150.], 'aspect_ratios': [2., 3.]},
        {'min_sizes': [150.], 'max_sizes': [195.], 'aspect_ratios': [2., 3.]},
        {'min_sizes': [195.], 'max_sizes': [240.], 'aspect_ratios': [2., 3.]},
        {'min_sizes': [240.], 'max_sizes': [285.], 'aspect_ratios': [2., 3.]},
        {'min_sizes': [285.], 'max_sizes': [300.], 'aspect_ratios': [2., 3.]},
    ]
}
