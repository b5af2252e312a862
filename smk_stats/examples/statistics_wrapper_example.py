"""
Example: Using the Statistics convenience wrapper.

This example shows how to run every metric over a few normalized artwork
dicts (the shape produced by the SMK API normalizer) and read the results.
"""
import logging

from smk_stats.statistics import Statistics, StatisticsPipeline, StatisticsConfig


ARTWORKS = [
    {
        'gender': 'male', 'object_type': 'Painting', 'creatorName': 'Vilhelm Hammershøi',
        'nationality': 'Danish', 'birthYear': 1864, 'productionYear': 1901, 'acquisitionYear': 1921,
        'exhibitions': 4, 'onDisplay': True, 'hasImage': True,
        'dimensions': {'height': 550, 'width': 460, 'area': 253000},
        'colors': ['#8B7355', '#D8D2C4'],
        'geoLocations': [{'name': 'Strandgade 30', 'latitude': 55.6711, 'longitude': 12.5935}],
        'department': 'Painting and Sculpture',
    },
    {
        'gender': 'female', 'object_type': 'Painting', 'creatorName': 'Anna Ancher',
        'nationality': 'Danish', 'birthYear': 1859, 'productionYear': 1883, 'acquisitionYear': 2005,
        'exhibitions': 2, 'hasImage': True,
        'dimensions': {'height': 800, 'width': 600, 'area': 480000},
        'colors': ['#1F3A93', '#F4D03F'],
        'geoLocations': [{'name': 'Skagen', 'latitude': 57.7209, 'longitude': 10.5839}],
        'depictedPersons': [{'gender': 'female'}],
        'department': 'Painting and Sculpture',
    },
    {
        'gender': None, 'object_type': 'Print', 'creatorName': 'Unknown',
        'productionYear': 1650, 'department': 'Prints and Drawings',
    },
]


def example_basic_usage():
    """Basic usage of Statistics wrapper."""
    stats = Statistics(records=ARTWORKS)

    print("=== Gender Balance ===")
    summary = stats.get_value('collection', 'gender_summary')
    for gender, count in summary['counts'].items():
        print(f"{gender}: {count} ({summary[gender.lower() + '_percent']}%)")

    print("\n=== Acquisition Lag ===")
    lag = stats.get_value('timeline', 'acquisition_lag')
    for label, male, female in zip(lag['labels'], lag['male_data'], lag['female_data']):
        print(f"{label}: male {male}, female {female}")

    print("\n=== Depicted Places ===")
    places = stats.get_value('geography', 'depicted_locations')
    for label, count in zip(places['distance_bins'], places['distance_distribution']['Female']):
        if count:
            print(f"Female artists, {label}: {count}")

    all_stats = stats.to_dict()
    print(f"\nTotal categories collected: {len(all_stats)}")


def example_custom_config():
    """Example running only selected collectors with custom options."""
    config = StatisticsConfig(
        collectors={'geography': False, 'colors': False},
        statistics_options={'object_type': 'Print', 'top_n': 5},
    )
    pipeline = StatisticsPipeline(config=config)
    stats = pipeline.run(ARTWORKS)

    print("\n=== Custom Configuration ===")
    print(f"Categories: {sorted(stats.categories)}")
    print(f"Prints with dimensions: {stats.get_value('dimensions', 'dimensions')['total_count']}")


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    example_basic_usage()
    example_custom_config()
