from src.crop_yield.india.models import RAW_DATA_COLUMNS, RawRecord


def make_record(
    year="1951-52", crop="Wheat", production="", yield_="", area="", country="India"
):
    return RawRecord(
        country=country,
        year_text=year,
        crop_name=crop,
        production_text=production,
        yield_text=yield_,
        area_text=area,
    )


def make_raw_item(year, crop, production="", yield_="", area=""):
    return {
        RAW_DATA_COLUMNS["country"]: "India",
        RAW_DATA_COLUMNS["year"]: year,
        RAW_DATA_COLUMNS["crop"]: crop,
        RAW_DATA_COLUMNS["production"]: production,
        RAW_DATA_COLUMNS["yield"]: yield_,
        RAW_DATA_COLUMNS["area"]: area,
    }
