"""
Section validators for the quote PDF.

Each section is a fixed table of (display name, fixture key, PDF label)
entries. A section turns a normalized fixture into FieldSpecs and runs them
through the engine's field validator, in table order.
"""

import logging
from typing import TYPE_CHECKING, Dict, List, Sequence

from .field_extractor import PricingExtractor
from .fixtures import canonical_key
from .models import FieldDefinition, FieldOutcome, FieldSpec

if TYPE_CHECKING:
    from .validation_engine import QuoteValidationEngine


logger = logging.getLogger(__name__)


INSURANT_FIELDS = (
    FieldDefinition('First Name', 'firstname', 'First Name'),
    FieldDefinition('Last Name', 'lastname', 'Last Name'),
    FieldDefinition('Date of Birth', 'dateofbirth', 'Birthdate'),
    FieldDefinition('Street Address', 'streetaddress', 'Street Address'),
    FieldDefinition('Country', 'country', 'Country'),
    FieldDefinition('ZIP Code', 'zipcode', 'ZIP'),
    FieldDefinition('City', 'city', 'City'),
    FieldDefinition('Occupation', 'occupation', 'Occupation'),
)

VEHICLE_FIELDS = (
    FieldDefinition('Make', 'make', 'Make'),
    FieldDefinition('Engine Performance', 'enginePerformance', 'Engine Performance'),
    FieldDefinition('Number of Seats', 'numberofseats', 'Number of Seats'),
    FieldDefinition('Fuel Type', 'fuel', 'Fuel Type'),
    FieldDefinition('List Price', 'listprice', 'List Price'),
    FieldDefinition('Annual Mileage', 'annualmileage', 'Annual Mileage'),
)

PRODUCT_FIELDS = (
    FieldDefinition('Insurance Sum', 'insurancesum', 'Insurance Sum'),
    FieldDefinition('Merit Rating', 'meritrating', 'Merit Rating'),
    FieldDefinition('Damage Insurance', 'damageinsurance', 'Damage Insurance'),
    FieldDefinition('Courtesy Car', 'courtesycar', 'Courtesy Car'),
)

PRICING_FIELD = FieldDefinition('Pricing', 'pricing', 'PRICING')


class SectionValidator:
    """Validates one fixed group of related fields."""

    def __init__(self, key: str, title: str, fields: Sequence[FieldDefinition],
                 extractor=None):
        self.key = key
        self.title = title
        self.fields = tuple(fields)
        # None defers to the engine extractor
        self.extractor = extractor

    def build_field_specs(self, fixture: Dict[str, str]) -> List[FieldSpec]:
        """
        Pair each field definition with its expected value.

        ``fixture`` must already be normalized. Fields the fixture does not
        supply are skipped.
        """
        specs = []
        for definition in self.fields:
            expected = fixture.get(canonical_key(definition.fixture_key))
            if expected is None:
                logger.debug(f"{self.title}: no fixture value for '{definition.name}', skipping")
                continue
            specs.append(FieldSpec(definition.name, definition.pdf_label, expected))
        return specs

    def validate(self, engine: 'QuoteValidationEngine', text: str,
                 fixture: Dict[str, str]) -> List[FieldOutcome]:
        logger.info(f"Validating {self.title} section...")
        outcomes = [
            engine.validate_field(spec.name, spec.expected_value, text,
                                  spec.source_label, extractor=self.extractor)
            for spec in self.build_field_specs(fixture)
        ]
        logger.info(f"{self.title} validation completed: "
                    f"{sum(1 for o in outcomes if o.matched)}/{len(outcomes)} matched")
        return outcomes


class PricingSectionValidator(SectionValidator):
    """
    Validates the quoted price. Runs only when an expected price is present
    under the ``pricing`` fixture key.
    """

    def __init__(self):
        super().__init__('pricing', 'Pricing', (PRICING_FIELD,), extractor=PricingExtractor())


def default_sections() -> Dict[str, SectionValidator]:
    """Return fresh section validators keyed by section name, in PDF order."""
    return {
        'insurant': SectionValidator('insurant', 'Insurant Data', INSURANT_FIELDS),
        'vehicle': SectionValidator('vehicle', 'Vehicle Data', VEHICLE_FIELDS),
        'product': SectionValidator('product', 'Product Data', PRODUCT_FIELDS),
        'pricing': PricingSectionValidator(),
    }


SECTION_NAMES = ('insurant', 'vehicle', 'product', 'pricing')
