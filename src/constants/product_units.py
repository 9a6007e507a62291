from models.domain import ProductType

UNIT_TO_PRODUCT_TYPE = {
    "كرتونة": ProductType.CARTON,
    "دزينة": ProductType.DOZEN,
    "علبة": ProductType.CAN,
    "تنكة": ProductType.TANK,
    "بكيت": ProductType.PACKET,
    "كغم": ProductType.KILOGRAM,
    "غلن": ProductType.GALLON,
    "كيلو": ProductType.KILO,
    "شوال": ProductType.SACK,
    "كيس": ProductType.BAG,
    "سطل": ProductType.BUCKET,
    "ربطة": ProductType.BUNDLE,
}
