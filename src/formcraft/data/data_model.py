from pydantic import BaseModel, ConfigDict


class DataModel(BaseModel):
    """
    Pydantic BaseModel with custom defaults:
    - frozen = True
    - model_dump(exclude_none=True)
    - `set` method to create an updated copy (no validation).
    - `merge` method to create an updated, re-validated copy.
    """

    model_config = ConfigDict(frozen=True)

    def set(self, **kwargs):
        return self.model_copy(update=kwargs)

    def merge(self, **kwargs):
        unknown = set(kwargs) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f'Unknown attributes for {type(self).__name__}: {sorted(unknown)}')

        return type(self).model_validate({**dict(self), **kwargs})

    def model_dump(self, by_alias=True, exclude_none=True, **kwargs):
        return super().model_dump(by_alias=by_alias, exclude_none=exclude_none, **kwargs)
