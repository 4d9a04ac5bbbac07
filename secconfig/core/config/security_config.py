"""
Typed security settings contract for secconfig.

The nested models below describe the shape of the security settings and are
the single source of the built-in store entries: every leaf field declares
its default value, its description and whether the store lets it change.
The store itself only ever holds the flattened dotted keys.
"""

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

from core.models import ConfigEntry
from core.types import LogLevel


class DetectionConfig(BaseModel):
    """Threat detection settings."""
    
    model_config = ConfigDict(populate_by_name=True)
    
    enabled: bool = Field(
        default=True,
        description="Enable threat detection",
        json_schema_extra={"mutable": False}
    )
    
    confidence_threshold: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        alias="confidenceThreshold",
        description="Minimum confidence for alerts",
        json_schema_extra={"mutable": True}
    )


class ContainmentConfig(BaseModel):
    """Containment settings."""
    
    model_config = ConfigDict(populate_by_name=True)
    
    auto_contain: bool = Field(
        default=True,
        alias="autoContain",
        description="Auto-contain high threats",
        json_schema_extra={"mutable": False}
    )
    
    threshold: Union[int, float] = Field(
        default=3,
        description="Threat level for auto-containment",
        json_schema_extra={"mutable": True}
    )


class LoggingConfig(BaseModel):
    """Logging settings."""
    
    model_config = ConfigDict(populate_by_name=True)
    
    enabled: bool = Field(
        default=True,
        description="Enable logging",
        json_schema_extra={"mutable": False}
    )
    
    level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Log level",
        json_schema_extra={"mutable": True}
    )


class SecurityConfig(BaseModel):
    """
    Nested security settings.
    
    Sections and their store keys:
        detection.enabled, detection.confidenceThreshold
        containment.autoContain, containment.threshold
        logging.enabled, logging.level
    """
    
    model_config = ConfigDict(populate_by_name=True)
    
    detection: DetectionConfig = Field(
        default_factory=DetectionConfig,
        description="Threat detection configuration"
    )
    
    containment: ContainmentConfig = Field(
        default_factory=ContainmentConfig,
        description="Containment configuration"
    )
    
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration"
    )
    
    def to_dict(self) -> dict[str, Any]:
        """
        Convert settings to the nested dictionary format using store names.
        
        Returns:
            Settings as a JSON-compatible dictionary
        """
        return self.model_dump(mode='json', by_alias=True)
    
    def to_entries(self) -> list[ConfigEntry]:
        """
        Flatten the settings into store entries.
        
        Keys are "<section>.<field alias>"; order follows field declaration.
        
        Returns:
            One ConfigEntry per leaf field
        """
        data = self.to_dict()
        entries: list[ConfigEntry] = []
        
        for section_name, section_field in type(self).model_fields.items():
            section_key = section_field.alias or section_name
            section = getattr(self, section_name)
            
            for field_name, field_info in type(section).model_fields.items():
                field_key = field_info.alias or field_name
                extra = field_info.json_schema_extra
                mutable = extra.get("mutable", True) if isinstance(extra, dict) else True
                entries.append(ConfigEntry(
                    key=f"{section_key}.{field_key}",
                    value=data[section_key][field_key],
                    description=field_info.description,
                    mutable=bool(mutable),
                ))
        
        return entries
