from typing import NewType

EventTitle = NewType('EventTitle', str)
ChoiceLabel = NewType('ChoiceLabel', str)
TensionType = NewType('TensionType', str)
