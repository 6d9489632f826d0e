"""
Retailer feed registry.

Each entry is one retailer's published fuel-price document. To add a
retailer, append a Source here; every search picks it up automatically.
"""
from typing import List, Optional

from app.schemas.fuel import Source


FUEL_SOURCES = (
    Source(name="Applegreen UK", url="https://applegreenstores.com/fuel-prices/data.json"),
    Source(name="Ascona Group", url="https://fuelprices.asconagroup.co.uk/newfuel.json"),
    Source(name="Asda", url="https://storelocator.asda.com/fuel_prices_data.json"),
    # Feed has been unreachable; kept listed so it can be re-enabled
    Source(
        name="bp",
        url="https://www.bp.com/en_gb/uk/home/fuelprices/fuel_prices_data.json",
        enabled=False,
    ),
    Source(name="Esso Tesco Alliance", url="https://fuelprices.esso.co.uk/latestdata.json"),
    Source(name="JET Retail UK", url="https://jetlocal.co.uk/fuel_prices_data.json"),
    Source(name="Karan Retail Ltd", url="https://api2.krlmedia.com/integration/live_price/krl"),
    Source(name="Morrisons", url="https://www.morrisons.com/fuel-prices/fuel.json"),
    Source(name="Moto", url="https://moto-way.com/fuel-price/fuel_prices.json"),
    Source(name="Motor Fuel Group", url="https://fuel.motorfuelgroup.com/fuel_prices_data.json"),
    Source(
        name="Rontec",
        url="https://www.rontec-servicestations.co.uk/fuel-prices/data/fuel_prices_data.json",
    ),
    Source(
        name="Sainsbury’s",
        url="https://api.sainsburys.co.uk/v1/exports/latest/fuel_prices_data.json",
    ),
    # Published as an HTML page; fails JSON parsing and contributes nothing
    Source(name="Shell", url="https://www.shell.co.uk/fuel-prices-data.html"),
    Source(name="Tesco", url="https://www.tesco.com/fuel_prices/fuel_prices_data.json"),
)


def get_sources() -> List[Source]:
    """Enabled sources, in registry order."""
    return [source for source in FUEL_SOURCES if source.enabled]


def get_source(name: str) -> Optional[Source]:
    """Look up a registered source by its exact name, enabled or not."""
    for source in FUEL_SOURCES:
        if source.name == name:
            return source
    return None
