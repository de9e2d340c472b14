from typing import Dict, Optional, Type

from pydantic import BaseModel, ConfigDict, Field


class OptionSpec(BaseModel):
    """A single visible option, as declared by one option type."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    declaring_type: Type = Field(..., description="The option type whose registration declares the accessor.")
    name: str = Field(..., description="The property name derived from the accessor.")
    accessor: str = Field(..., description="The accessor name as registered.")
    value_type: Type = Field(..., description="The type the accessor returns.")

    def describe(self) -> str:
        """Render the spec on one line, e.g. 'ChannelOptions.defaultScheme (accessor: getDefaultScheme, str)'."""
        return (
            f"{self.declaring_type.__name__}.{self.name} "
            f"(accessor: {self.accessor}, {getattr(self.value_type, '__name__', str(self.value_type))})"
        )


class OptionsRegistration(BaseModel):
    """The static registration of one option type."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    options_type: Type = Field(..., description="The registered option type.")
    accessors: Dict[str, Optional[Type]] = Field(
        default_factory=dict,
        description="Accessor name -> return type, in declaration order. None declares a void accessor."
    )
    hidden: bool = Field(False, description="Hidden types contribute no options to discovery.")
