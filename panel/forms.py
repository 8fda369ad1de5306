from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField, IntegerField, SelectField, BooleanField
from wtforms.validators import DataRequired, NumberRange, Optional, Length
from flask_babel import lazy_gettext as _

from panel.models import AppSettings
from panel.services.durations import SECONDS_PER_UNIT, DurationSpec, unit_choices

DEFAULT_LICENSE_MASK = '******-******-******-******-******-******'


class AppSettingsForm(FlaskForm):
    """Durations and limits of the app-settings screen.

    Numeric inputs are plain text fields: bad input is not rejected but
    replaced by the option's default when applied (see AppSettings).
    """
    cooldown_unit = SelectField(_('HWID Reset Cooldown Unit'), choices=unit_choices(),
                                default=str(SECONDS_PER_UNIT['day']))
    cooldown_duration = StringField(_('HWID Reset Cooldown Duration'),
                                    render_kw={'inputmode': 'numeric'})
    session_unit = SelectField(_('Session Expiry Unit'), choices=unit_choices('week'),
                               default=str(SECONDS_PER_UNIT['hour']))
    session_duration = StringField(_('Session Expiry Duration'),
                                   render_kw={'inputmode': 'numeric'})
    min_hwid = StringField(_('Minimum HWID Length'), render_kw={'inputmode': 'numeric'})
    min_username_length = StringField(_('Minimum username length'),
                                      render_kw={'inputmode': 'numeric'})
    submit = SubmitField(_('Update App Settings'), render_kw={"class": "btn btn-primary"})

    @classmethod
    def for_settings(cls, settings, **kwargs):
        """Build a form pre-filled from existing settings."""
        data = {
            'cooldown_unit': str(settings.cooldown_unit),
            'cooldown_duration': str(settings.cooldown_duration),
            'session_unit': str(settings.session_unit),
            'session_duration': str(settings.session_duration),
            'min_hwid': str(settings.min_hwid),
            'min_username_length': str(settings.min_username_length),
        }
        return cls(data=data, **kwargs)

    def apply_to(self, settings):
        """Return a copy of settings updated with the submitted values."""
        payload = settings.to_payload()
        payload.update({
            'cooldownexpiry': self.cooldown_unit.data,
            'cooldownduration': self.cooldown_duration.data,
            'sessionexpiry': self.session_unit.data,
            'sessionduration': self.session_duration.data,
            'minHwid': self.min_hwid.data,
            'minUsernameLength': self.min_username_length.data,
        })
        return AppSettings.from_payload(payload)


class AddTimeForm(FlaskForm):
    """Add time to licenses or extend user subscriptions."""
    time = IntegerField(_('Time to add'), validators=[
        DataRequired(message=_("Field 'Time' is required.")),
        NumberRange(min=1, message=_('Please enter a positive number.'))
    ])
    unit = SelectField(_('Unit'), choices=unit_choices(), default=str(SECONDS_PER_UNIT['second']))
    submit = SubmitField(_('Add Time'), render_kw={"class": "btn btn-primary"})

    def duration_spec(self):
        return DurationSpec(magnitude=self.time.data, unit=self.unit.data)


class LicenseCreateForm(FlaskForm):
    amount = IntegerField(_('Amount'), default=1, validators=[
        DataRequired(), NumberRange(min=1, max=1000)])
    mask = StringField(_('License Mask'), default=DEFAULT_LICENSE_MASK,
                       validators=[DataRequired(), Length(max=100)])
    level = IntegerField(_('Level'), default=1, validators=[DataRequired(), NumberRange(min=1)])
    duration = IntegerField(_('Expiry'), validators=[
        DataRequired(message=_("Field 'Expiry' is required.")), NumberRange(min=1)])
    expiry_unit = SelectField(_('Expiry Unit'), choices=unit_choices(),
                              default=str(SECONDS_PER_UNIT['day']))
    note = StringField(_('Note'), validators=[Optional(), Length(max=255)])
    lowercase_letters = BooleanField(_('Lowercase letters'), default=True)
    uppercase_letters = BooleanField(_('Uppercase letters'), default=True)
    submit = SubmitField(_('Create License'), render_kw={"class": "btn btn-primary"})

    def duration_spec(self):
        return DurationSpec(magnitude=self.duration.data, unit=self.expiry_unit.data)


def form_errors(form):
    """Form errors with lazy messages rendered, ready for jsonify."""
    return {name: [str(message) for message in messages] for name, messages in form.errors.items()}
