"""Property names from common vocabularies, for use as keys in ``properties``."""


class Schema:
    """schema.org"""
    GEO = "geo"
    LATITUDE = "latitude"
    LONGITUDE = "longitude"


class DublinCore:
    """DCMI Metadata Terms"""
    ALTERNATIVE = "alternative"
    AVAILABLE = "available"
    CONTRIBUTOR = "contributor"
    CREATED = "created"
    CREATOR = "creator"
    DESCRIPTION = "description"
    EXTENT = "extent"
    HAS_VERSION = "hasVersion"
    IDENTIFIER = "identifier"
    IS_PART_OF = "isPartOf"
    IS_REFERENCED_BY = "isReferencedBy"
    IS_VERSION_OF = "isVersionOf"
    ISSUED = "issued"
    MEDIATOR = "mediator"
    MODIFIED = "modified"
    PROVENANCE = "provenance"
    PUBLISHER = "publisher"
    REFERENCES = "references"
    RELATION = "relation"
    REPLACES = "replaces"
    SOURCE = "source"
    SUBJECT = "subject"
    TITLE = "title"
    TYPE = "type"
    VALID = "valid"


class Foaf:
    ORGANIZATION = "organization"


class Dcat:
    KEYWORD = "keyword"
