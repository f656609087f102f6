from datetime import datetime

from sqlalchemy import Integer, Column, String, Float, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from linked_products.database import Base


class Product(Base):
    """
        SQLAlchemy model for the 'products' table.

        A catalogue product as the storefront renders it. The description is page
        content and may embed shortcodes such as [product_cross_sells].

        Attributes:
            __tablename__ (str): 'products'.
            id_product (Column): primary key.
            status (Column): 'publish' or 'draft'; only published products are shown.
            catalog_visibility (Column): 'visible', 'catalog', 'search' or 'hidden'.
            stock_status (Column): 'instock', 'outofstock' or 'onbackorder'.
            links (relationship): up-sell and cross-sell links to other products.
    """
    __tablename__ = "products"

    id_product = Column(Integer, primary_key=True, index=True)
    name = Column(String(128))
    sku = Column(String(32))
    price = Column(Float, default=0.0)
    description = Column(Text, default='')
    status = Column(String(20), default='publish', index=True)
    catalog_visibility = Column(String(20), default='visible')
    stock_status = Column(String(20), default='instock')
    menu_order = Column(Integer, default=0)
    date_created = Column(DateTime, default=datetime.now)
    date_modified = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    links = relationship(
        "ProductLink",
        foreign_keys="ProductLink.id_product",
        order_by="ProductLink.position",
        cascade="all, delete-orphan",
        back_populates="product",
    )

    def get_upsell_ids(self):
        return [link.id_linked_product for link in self.links if link.link_type == ProductLink.UPSELL]

    def get_cross_sell_ids(self):
        return [link.id_linked_product for link in self.links if link.link_type == ProductLink.CROSS_SELL]

    def __repr__(self):
        return f"<Product id={self.id_product} name={self.name!r}>"


class ProductLink(Base):
    __tablename__ = "product_links"

    UPSELL = "upsell"
    CROSS_SELL = "cross_sell"

    id_product_link = Column(Integer, primary_key=True, index=True)
    id_product = Column(Integer, ForeignKey('products.id_product'), index=True, nullable=False)
    id_linked_product = Column(Integer, index=True, nullable=False)
    link_type = Column(String(16), nullable=False)
    position = Column(Integer, default=0)

    product = relationship("Product", foreign_keys=[id_product], back_populates="links")
