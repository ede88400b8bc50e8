from typing import Any, Dict
import json
from pydantic import BaseModel, ConfigDict

class BaseSchema(BaseModel):
	"""
	Base schema class shared by every request/response model.
	Field aliases are accepted on input alongside field names.
	"""

	model_config = ConfigDict(populate_by_name=True)

	def to_dict(self) -> Dict[str, Any]:
		"""Convert model to a JSON-ready dictionary (datetimes as ISO strings, aliases applied)."""
		return json.loads(self.model_dump_json(by_alias=True))
