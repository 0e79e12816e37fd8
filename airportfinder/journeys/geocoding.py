"""
Postcode geocoding via postcodes.io
"""

import logging
import os
from typing import Optional
from urllib.parse import quote

import httpx

from .models import Coordinates


class PostcodeClient:
    """Async client resolving UK postcodes to coordinates"""

    def __init__(self, base_url: str = "https://api.postcodes.io", timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else float(os.getenv("AIRPORTFINDER_TIMEOUT", "30"))
        self.logger = logging.getLogger(__name__)

    async def geocode(self, postcode: str) -> Optional[Coordinates]:
        """
        Resolve a postcode to coordinates

        Args:
            postcode: Free-text UK postcode

        Returns:
            Coordinates, or None if the postcode could not be resolved
        """
        encoded = quote(postcode.strip(), safe="")

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(f"{self.base_url}/postcodes/{encoded}")

                if not response.is_success:
                    self.logger.warning(f"Postcode lookup returned {response.status_code} for {postcode}")
                    return None

                result = response.json()["result"]
                return Coordinates(lat=result["latitude"], lon=result["longitude"])

        except httpx.HTTPError as e:
            self.logger.error(f"HTTP error geocoding postcode {postcode}: {e}")
            return None
        except (KeyError, TypeError, ValueError) as e:
            self.logger.error(f"Error parsing postcode response for {postcode}: {e}")
            return None
