"""
Data models for SEO Configurator.

This module defines the canonical SEOConfig record, its optional groups,
and the flat SEOAnswers record collected during setup. Optional groups are
modelled as Optional fields: a group is either fully absent (None) or
present with at least one populated member.

Serialization uses the camelCase keys of the persisted seo.config.json.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None, keeping insertion order."""
    return {key: value for key, value in data.items() if value is not None}


def _text(data: dict[str, Any], key: str, default: str = "") -> str:
    """Read a required text answer, treating a missing or null value as the default."""
    value = data.get(key)
    return default if value is None else str(value)


def _flag(data: dict[str, Any], key: str) -> bool:
    """
    Read a yes/no answer.

    Raises:
        ValueError: If the value is present but not a JSON boolean.
    """
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be true or false, got {value!r}")
    return value


@dataclass
class Coordinates:
    """Geographic coordinates of a physical location."""
    latitude: float
    longitude: float

    def to_dict(self) -> dict[str, Any]:
        return {"latitude": self.latitude, "longitude": self.longitude}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Coordinates":
        return cls(latitude=data["latitude"], longitude=data["longitude"])


@dataclass
class Location:
    """Physical address of a local business."""
    street_address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    coordinates: Optional[Coordinates] = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({
            "streetAddress": self.street_address,
            "city": self.city,
            "state": self.state,
            "postalCode": self.postal_code,
            "country": self.country,
            "coordinates": self.coordinates.to_dict() if self.coordinates else None,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Location":
        coordinates = data.get("coordinates")
        return cls(
            street_address=data.get("streetAddress"),
            city=data.get("city"),
            state=data.get("state"),
            postal_code=data.get("postalCode"),
            country=data.get("country"),
            coordinates=Coordinates.from_dict(coordinates) if coordinates else None,
        )


@dataclass
class Contact:
    """Public contact details."""
    phone: Optional[str] = None
    email: Optional[str] = None
    hours: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({"phone": self.phone, "email": self.email, "hours": self.hours})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contact":
        return cls(phone=data.get("phone"), email=data.get("email"), hours=data.get("hours"))


@dataclass
class Social:
    """Social media handles and page URLs, one per platform."""
    twitter: Optional[str] = None  # handle without the leading @
    facebook: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None
    youtube: Optional[str] = None
    github: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({
            "twitter": self.twitter,
            "facebook": self.facebook,
            "instagram": self.instagram,
            "linkedin": self.linkedin,
            "youtube": self.youtube,
            "github": self.github,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Social":
        return cls(
            twitter=data.get("twitter"),
            facebook=data.get("facebook"),
            instagram=data.get("instagram"),
            linkedin=data.get("linkedin"),
            youtube=data.get("youtube"),
            github=data.get("github"),
        )


@dataclass
class SEOStrategy:
    """The site's SEO goal and keyword targets."""
    primary_goal: str
    target_keywords: list[str] = field(default_factory=list)
    competitors: Optional[list[str]] = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({
            "primaryGoal": self.primary_goal,
            "targetKeywords": list(self.target_keywords),
            "competitors": list(self.competitors) if self.competitors is not None else None,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SEOStrategy":
        competitors = data.get("competitors")
        return cls(
            primary_goal=data["primaryGoal"],
            target_keywords=list(data.get("targetKeywords", [])),
            competitors=list(competitors) if competitors is not None else None,
        )


@dataclass
class StructuredData:
    """schema.org typing for the JSON-LD block."""
    type: str
    additional_types: Optional[list[str]] = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({
            "type": self.type,
            "additionalTypes": list(self.additional_types) if self.additional_types is not None else None,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StructuredData":
        additional = data.get("additionalTypes")
        return cls(
            type=data["type"],
            additional_types=list(additional) if additional is not None else None,
        )


@dataclass
class SEOConfig:
    """
    The canonical, normalized SEO configuration of a site.

    Built once per setup run, persisted verbatim to seo.config.json and
    reused unchanged on later runs.
    """
    # Basic information
    site_name: str
    site_url: str  # absolute, never ends with "/"
    business_type: str
    description: str
    keywords: list[str]

    # Business details
    business_name: str
    target_audience: str
    unique_value: str

    # Technical SEO
    default_image: Optional[str] = None
    theme_color: Optional[str] = None
    locale: Optional[str] = None
    author: Optional[str] = None

    # Optional groups
    is_local: Optional[bool] = None
    location: Optional[Location] = None
    contact: Optional[Contact] = None
    social: Optional[Social] = None
    seo_strategy: Optional[SEOStrategy] = None
    structured_data: Optional[StructuredData] = None

    @property
    def twitter_handle(self) -> Optional[str]:
        """Twitter handle prefixed with @, or None when no handle is set."""
        if self.social and self.social.twitter:
            return f"@{self.social.twitter}"
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase shape of seo.config.json."""
        return _compact({
            "siteName": self.site_name,
            "siteUrl": self.site_url,
            "businessType": self.business_type,
            "description": self.description,
            "keywords": list(self.keywords),
            "businessName": self.business_name,
            "targetAudience": self.target_audience,
            "uniqueValue": self.unique_value,
            "defaultImage": self.default_image,
            "themeColor": self.theme_color,
            "locale": self.locale,
            "author": self.author,
            "isLocal": self.is_local,
            "location": self.location.to_dict() if self.location else None,
            "contact": self.contact.to_dict() if self.contact else None,
            "social": self.social.to_dict() if self.social else None,
            "seoStrategy": self.seo_strategy.to_dict() if self.seo_strategy else None,
            "structuredData": self.structured_data.to_dict() if self.structured_data else None,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SEOConfig":
        """
        Build an SEOConfig from its persisted camelCase shape.

        Raises:
            KeyError: If a required field is missing.
        """
        location = data.get("location")
        contact = data.get("contact")
        social = data.get("social")
        strategy = data.get("seoStrategy")
        structured = data.get("structuredData")

        return cls(
            site_name=data["siteName"],
            site_url=data["siteUrl"],
            business_type=data["businessType"],
            description=data["description"],
            keywords=list(data["keywords"]),
            business_name=data["businessName"],
            target_audience=data["targetAudience"],
            unique_value=data["uniqueValue"],
            default_image=data.get("defaultImage"),
            theme_color=data.get("themeColor"),
            locale=data.get("locale"),
            author=data.get("author"),
            is_local=data.get("isLocal"),
            location=Location.from_dict(location) if location is not None else None,
            contact=Contact.from_dict(contact) if contact is not None else None,
            social=Social.from_dict(social) if social is not None else None,
            seo_strategy=SEOStrategy.from_dict(strategy) if strategy is not None else None,
            structured_data=StructuredData.from_dict(structured) if structured is not None else None,
        )


@dataclass
class SEOAnswers:
    """Flat answer record returned by the setup questionnaire."""
    business_name: str
    site_url: str
    business_type: str
    description: str
    keywords: str  # comma-separated
    target_audience: str
    unique_value: str
    is_local: bool = False
    primary_goal: str = "traffic"
    target_keywords: str = ""  # comma-separated
    competitors: Optional[str] = None  # comma-separated

    # Location and contact, only asked for local businesses
    street_address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    hours: Optional[str] = None

    author: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None
    youtube: Optional[str] = None
    github: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SEOAnswers":
        """
        Build an answer record from camelCase keys.

        Missing or null text answers become empty.

        Raises:
            ValueError: If isLocal is not a boolean.
        """
        return cls(
            business_name=_text(data, "businessName"),
            site_url=_text(data, "siteUrl"),
            business_type=_text(data, "businessType"),
            description=_text(data, "description"),
            keywords=_text(data, "keywords"),
            target_audience=_text(data, "targetAudience"),
            unique_value=_text(data, "uniqueValue"),
            is_local=_flag(data, "isLocal"),
            primary_goal=_text(data, "primaryGoal", "traffic"),
            target_keywords=_text(data, "targetKeywords"),
            competitors=data.get("competitors"),
            street_address=data.get("streetAddress"),
            city=data.get("city"),
            state=data.get("state"),
            postal_code=data.get("postalCode"),
            country=data.get("country"),
            phone=data.get("phone"),
            email=data.get("email"),
            hours=data.get("hours"),
            author=data.get("author"),
            twitter=data.get("twitter"),
            facebook=data.get("facebook"),
            instagram=data.get("instagram"),
            linkedin=data.get("linkedin"),
            youtube=data.get("youtube"),
            github=data.get("github"),
        )
