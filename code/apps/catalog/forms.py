from django import forms

from .models import Game

TAG_CHOICES = [("welder", "Welder"), ("painter", "Painter"), ("lifter", "Lifter")]


class RobotForm(forms.Form):
    name = forms.CharField(max_length=32)
    tags = forms.MultipleChoiceField(choices=TAG_CHOICES)
    motto = forms.CharField(required=False)
    serial = forms.CharField(required=False, disabled=True, initial="RX-0")
    password = forms.CharField(required=False, disabled=True)
    colour = forms.ChoiceField(
        choices=[("red", "Red"), ("blue", "Blue"), ("black", "Black")],
        required=False,
    )

    def clean_colour(self):
        colour = self.cleaned_data["colour"]
        if colour == "black":
            raise forms.ValidationError("%(value)s is reserved.", code="exclusion", params={"value": colour})
        return colour


class GarageForm(forms.Form):
    """Colour choices depend on the owner the form is built for."""

    colour = forms.ChoiceField(choices=[("red", "Red"), ("black", "Black")], required=False)

    def __init__(self, *args, owner, **kwargs):
        super().__init__(*args, **kwargs)
        self.owner = owner
        if owner == "collector":
            self.fields["colour"].choices += [("gold", "Gold")]

    def clean_colour(self):
        colour = self.cleaned_data["colour"]
        if colour == "black":
            raise forms.ValidationError(
                "%(value)s is reserved for %(owner)s.", code="exclusion", params={"value": colour, "owner": self.owner}
            )
        return colour


class GameForm(forms.ModelForm):
    class Meta:
        model = Game
        fields = ["supported_os", "floors_with_enemies", "weapon"]
