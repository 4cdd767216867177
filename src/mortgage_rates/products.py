"""Catalog of tracked mortgage products and their fixed display identity."""

from dataclasses import dataclass
from typing import Any, Literal

Section = Literal["purchase", "refi"]

SECTIONS: tuple[Section, ...] = ("purchase", "refi")


@dataclass(frozen=True)
class ProductDefinition:
    """Immutable description of a tracked product.

    Args:
        key: Input key used for configuration (e.g., '30yr').
        env_suffix: Suffix of the environment variables for this product.
        section: Snapshot section the product belongs to.
        index: Position of the product within its section.
        label: Display name.
        tag: Short category annotation.
        tag_class: CSS classes for the tag.
        sub: Short descriptor.
        term: Loan term in years.
        featured: Whether the product is highlighted.
    """

    key: str
    env_suffix: str
    section: Section
    index: int
    label: str
    tag: str
    tag_class: str
    sub: str
    term: int
    featured: bool | None = None

    def identity(self) -> dict[str, Any]:
        """Return the display identity as snapshot (camelCase) fields."""
        fields: dict[str, Any] = {
            "label": self.label,
            "tag": self.tag,
            "tagClass": self.tag_class,
            "sub": self.sub,
            "term": self.term,
        }
        if self.featured is not None:
            fields["featured"] = self.featured
        return fields


PRODUCT_CATALOG: tuple[ProductDefinition, ...] = (
    ProductDefinition(
        key="30yr",
        env_suffix="30YR",
        section="purchase",
        index=0,
        label="30-Yr Fixed",
        tag="Conventional",
        tag_class="bg-blue-100 text-blue-700",
        sub="0 Points",
        term=30,
    ),
    ProductDefinition(
        key="15yr",
        env_suffix="15YR",
        section="purchase",
        index=1,
        label="15-Yr Fixed",
        tag="Aggressive",
        tag_class="bg-purple-100 text-purple-700",
        sub="Pay off faster",
        term=15,
    ),
    ProductDefinition(
        key="fha",
        env_suffix="FHA",
        section="purchase",
        index=2,
        label="30-Yr FHA",
        tag="Govt.",
        tag_class="bg-green-100 text-green-700",
        sub="Low Down Pmt",
        term=30,
    ),
    ProductDefinition(
        key="cashout",
        env_suffix="CASHOUT",
        section="refi",
        index=0,
        label="Cash-Out",
        tag="Consolidate",
        tag_class="bg-orange-100 text-orange-700",
        sub="Max 80% LTV",
        term=30,
    ),
    ProductDefinition(
        key="nopoint",
        env_suffix="NOPOINT",
        section="refi",
        index=1,
        label="No-Point Refi",
        tag="No Lender Fees",
        tag_class="bg-white text-green-700 border border-green-100",
        sub="We pay title & lender fees",
        term=30,
        featured=True,
    ),
)

PRODUCT_KEYS: tuple[str, ...] = tuple(product.key for product in PRODUCT_CATALOG)


def get_product(key: str) -> ProductDefinition:
    """Look up a product definition by its input key.

    Raises:
        KeyError: If the key is not in the catalog
    """
    for product in PRODUCT_CATALOG:
        if product.key == key:
            return product
    raise KeyError(key)


def products_in_section(section: Section) -> list[ProductDefinition]:
    """Return the products of a section in display order."""
    return sorted(
        (product for product in PRODUCT_CATALOG if product.section == section),
        key=lambda product: product.index,
    )
