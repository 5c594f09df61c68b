"""Sample building records for demos and tests."""

from core.models import BuildingRecord


def create_sample_record() -> BuildingRecord:
    """Nine-storey brick apartment block in Moscow with added mineral wool."""
    return BuildingRecord(
        floors=9,
        area=450,
        height=2.7,
        wall_description="кирпич 380мм + минвата 100мм",
        city="Москва",
        indoor_temp=22,
        window_area=45,
        window_type="double_glazed",
    )


SAMPLE_RECORD = create_sample_record()
