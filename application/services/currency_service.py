from domain.catalog import CurrencyCatalog
from domain.models.currency import CurrencyDescriptor


class CurrencyService:
	def __init__(self, catalog: CurrencyCatalog):
		self.catalog = catalog

	def get_currency_list(self) -> list[CurrencyDescriptor]:
		return self.catalog.list_currencies()
