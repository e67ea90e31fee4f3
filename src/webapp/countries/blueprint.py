"""
Countries blueprint: list, add and bulk upload from an Excel workbook.
"""

import logging

from flask import Blueprint, render_template, request, flash, redirect, url_for
from marshmallow import ValidationError

from contacts.exceptions import InvalidArgumentError, UnreadableWorkbookError
from contacts.schemas import CountryAddRequestSchema
from webapp.utils.services import countries_service

bp = Blueprint('countries', __name__, url_prefix='/countries')
logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = ('.xlsx',)


@bp.route('/', methods=['GET', 'POST'])
def index():
    """Country list, with an inline form for adding one."""
    service = countries_service()
    errors = {}
    form = {}

    if request.method == 'POST':
        form = request.form.to_dict()
        try:
            country = service.add_country(CountryAddRequestSchema().load(form))
            flash(f'Country "{country.country_name}" added.', 'success')
            return redirect(url_for('countries.index'))
        except ValidationError as err:
            errors = err.messages
        except InvalidArgumentError as e:
            errors = e.errors

    return render_template(
        'countries/index.html',
        countries=service.get_all_countries(),
        form=form,
        errors=errors,
    ), 400 if errors else 200


@bp.route('/upload-from-excel', methods=['GET', 'POST'])
def upload_from_excel():
    """
    Upload a workbook whose 'Countries' sheet lists names in column A
    (row 1 is a header).
    """
    if request.method == 'GET':
        return render_template('countries/upload.html')

    excel_file = request.files.get('excelFile')
    if excel_file is None or not excel_file.filename:
        return render_template('countries/upload.html', error_message='Please select an xlsx file'), 400

    if not excel_file.filename.lower().endswith(ALLOWED_EXTENSIONS):
        return render_template('countries/upload.html',
                               error_message='Unsupported file. \'xlsx\' file is expected'), 400

    try:
        count = countries_service().upload_countries_from_excel_file(excel_file.read())
    except UnreadableWorkbookError as e:
        logger.warning("Rejected country upload %s: %s", excel_file.filename, e)
        return render_template('countries/upload.html',
                               error_message='The file could not be read as an xlsx workbook'), 400

    logger.info("Uploaded %d countries from %s", count, excel_file.filename)
    return render_template('countries/upload.html', message=f'{count} Countries Uploaded')
