"""Embedded Georgia permit office dataset.

Read-only mirror used when the permit office store is unreachable or has no
rows for the requested filters. Built once at import time and never mutated.
"""

from datetime import datetime
from typing import Any

from app.models.permit_office import PermitOffice

DATASET_STATE = "GA"

_SNAPSHOT = datetime(2025, 1, 15)
_WEEKDAY_HOURS = "8:00 AM - 5:00 PM"


def _office(**fields: Any) -> PermitOffice:
    record: dict[str, Any] = {
        "state": DATASET_STATE,
        "created_at": _SNAPSHOT,
        "updated_at": _SNAPSHOT,
        "hours_monday": _WEEKDAY_HOURS,
        "hours_tuesday": _WEEKDAY_HOURS,
        "hours_wednesday": _WEEKDAY_HOURS,
        "hours_thursday": _WEEKDAY_HOURS,
        "hours_friday": _WEEKDAY_HOURS,
        "building_permits": True,
        "electrical_permits": True,
        "plumbing_permits": True,
        "mechanical_permits": True,
        "inspections": True,
        "data_source": "manual",
        "crawl_frequency": "monthly",
        "last_verified": _SNAPSHOT,
        "active": True,
    }
    record.update(fields)
    return PermitOffice(**record)


GEORGIA_PERMIT_OFFICES: tuple[PermitOffice, ...] = (
    _office(
        id="ga-atlanta-buildings",
        city="Atlanta",
        county="Fulton",
        jurisdiction_type="city",
        department_name="Office of Buildings",
        office_type="building",
        address="55 Trinity Ave SW, Atlanta, GA 30303",
        website="https://www.atlantaga.gov",
        zoning_permits=True,
        online_applications=True,
        online_payments=True,
        permit_tracking=True,
        online_portal_url="https://aca-prod.accela.com/atlanta_ga/",
        latitude=33.7489,
        longitude=-84.3915,
    ),
    _office(
        id="ga-athens-clarke-building",
        city="Athens",
        county="Clarke",
        jurisdiction_type="county",
        department_name="Athens-Clarke County Building Permits and Inspection",
        office_type="building",
        address="120 W Dougherty St, Athens, GA 30601",
        website="https://www.accgov.com",
        online_applications=True,
        online_payments=True,
        latitude=33.9612,
        longitude=-83.3780,
    ),
    _office(
        id="ga-augusta-planning",
        city="Augusta",
        county="Richmond",
        jurisdiction_type="county",
        department_name="Augusta Planning and Development",
        office_type="combined",
        address="535 Telfair St, Augusta, GA 30901",
        website="https://www.augustaga.gov",
        zoning_permits=True,
        planning_review=True,
        online_applications=True,
        latitude=33.4718,
        longitude=-81.9671,
    ),
    _office(
        id="ga-cobb-community-development",
        city="Marietta",
        county="Cobb",
        jurisdiction_type="county",
        department_name="Cobb County Community Development",
        office_type="combined",
        address="1150 Powder Springs St, Marietta, GA 30064",
        website="https://www.cobbcounty.org",
        zoning_permits=True,
        planning_review=True,
        online_applications=True,
        online_payments=True,
        permit_tracking=True,
        latitude=33.9526,
        longitude=-84.5585,
    ),
    _office(
        id="ga-columbus-inspections",
        city="Columbus",
        county="Muscogee",
        jurisdiction_type="county",
        department_name="Columbus Consolidated Government Inspections and Code",
        office_type="building",
        address="420 10th St, Columbus, GA 31901",
        website="https://www.columbusga.gov",
        online_applications=True,
        latitude=32.4650,
        longitude=-84.9877,
    ),
    _office(
        id="ga-dekalb-planning",
        city="Decatur",
        county="DeKalb",
        jurisdiction_type="county",
        department_name="DeKalb County Planning and Sustainability",
        office_type="combined",
        address="178 Sams St, Decatur, GA 30030",
        website="https://www.dekalbcountyga.gov",
        zoning_permits=True,
        planning_review=True,
        online_applications=True,
        online_payments=True,
        latitude=33.7748,
        longitude=-84.2963,
    ),
    _office(
        id="ga-gwinnett-planning",
        city="Lawrenceville",
        county="Gwinnett",
        jurisdiction_type="county",
        department_name="Gwinnett County Planning and Development",
        office_type="combined",
        address="446 W Crogan St, Lawrenceville, GA 30046",
        website="https://www.gwinnettcounty.com",
        zoning_permits=True,
        planning_review=True,
        online_applications=True,
        online_payments=True,
        permit_tracking=True,
        latitude=33.9562,
        longitude=-83.9880,
    ),
    _office(
        id="ga-macon-bibb-business-development",
        city="Macon",
        county="Bibb",
        jurisdiction_type="county",
        department_name="Macon-Bibb County Business Development Services",
        office_type="building",
        address="200 Cherry St, Macon, GA 31201",
        website="https://www.maconbibb.us",
        online_applications=True,
        latitude=32.8370,
        longitude=-83.6290,
    ),
    _office(
        id="ga-savannah-development-services",
        city="Savannah",
        county="Chatham",
        jurisdiction_type="city",
        department_name="City of Savannah Development Services",
        office_type="combined",
        address="5515 Abercorn St, Savannah, GA 31405",
        website="https://www.savannahga.gov",
        zoning_permits=True,
        planning_review=True,
        online_applications=True,
        online_payments=True,
        permit_tracking=True,
        latitude=32.0187,
        longitude=-81.1103,
    ),
    _office(
        id="ga-fulton-unincorporated",
        city="Atlanta",
        county="Fulton",
        jurisdiction_type="county",
        department_name="Fulton County Public Works Permitting",
        office_type="other",
        address="141 Pryor St SW, Atlanta, GA 30303",
        website="https://www.fultoncountyga.gov",
        electrical_permits=False,
        plumbing_permits=False,
        mechanical_permits=False,
        latitude=33.7479,
        longitude=-84.3920,
    ),
)
