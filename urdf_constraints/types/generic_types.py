ConstraintNameString = str
LinkNameString = str
EndpointTagString = str

ConstraintBaseFields = tuple[ConstraintNameString, LinkNameString | None, LinkNameString | None]
