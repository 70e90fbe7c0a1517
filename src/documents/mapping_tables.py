"""
Mapping tables for the supported court documents.

Each table maps questionnaire field names to the AcroForm field names of
one official form. Tables are static data; the mapper applies them.
"""

from typing import Dict, List

from documents.field_mapper import FieldMapping
from documents.field_mapper import get_source_fields as _table_source_fields
from documents.transforms import (
    format_county,
    format_currency,
    format_date,
    format_decision_making,
    format_employment_status,
    format_grounds,
    format_parent,
    format_schedule_type,
    format_yes_no_checkbox,
)


PETITION_NO_CHILDREN_FIELD_MAP: List[FieldMapping] = [
    # Personal information
    FieldMapping("PetitionerFirstName", "petitionerFirstName", required=True, section="personal-info"),
    FieldMapping("PetitionerMiddleName", "petitionerMiddleName", section="personal-info"),
    FieldMapping("PetitionerLastName", "petitionerLastName", required=True, section="personal-info"),
    FieldMapping("RespondentFirstName", "spouseFirstName", required=True, section="personal-info"),
    FieldMapping("RespondentLastName", "spouseLastName", required=True, section="personal-info"),
    FieldMapping("DateOfMarriage", "marriageDate", format_date, required=True, section="personal-info"),
    FieldMapping("DateOfSeparation", "separationDate", format_date, section="personal-info"),

    # Residence
    FieldMapping("County", "county", format_county, required=True, section="residence"),
    FieldMapping("PetitionerAddress", "petitionerAddress", section="residence"),
    FieldMapping("RespondentAddress", "spouseAddress", section="residence"),

    # Grounds
    FieldMapping("GroundsForDivorce", "grounds", format_grounds, required=True, section="grounds"),
]

PETITION_WITH_CHILDREN_FIELD_MAP: List[FieldMapping] = PETITION_NO_CHILDREN_FIELD_MAP + [
    FieldMapping("HasMinorChildren", "hasChildren", format_yes_no_checkbox, section="children"),
    FieldMapping("NumberOfChildren", "numberOfChildren", section="children"),
]


def _currency(output_field: str, source_field: str, section: str) -> FieldMapping:
    return FieldMapping(output_field, source_field, format_currency, section=section)


FINANCIAL_AFFIDAVIT_FIELD_MAP: List[FieldMapping] = [
    # Personal information
    FieldMapping("FullName", "fullName", required=True, section="personal-info"),
    FieldMapping("DateOfBirth", "dateOfBirth", format_date, section="personal-info"),
    FieldMapping("SSNLast4", "socialSecurityLastFour", section="personal-info"),
    FieldMapping("CurrentAddress", "currentAddress", section="personal-info"),
    FieldMapping("EmployerName", "employerName", section="personal-info"),
    FieldMapping("Occupation", "occupation", section="personal-info"),

    # Employment income
    FieldMapping("EmploymentStatus", "employmentStatus", format_employment_status, section="employment-income"),
    _currency("GrossMonthlyIncome", "grossMonthlySalary", "employment-income"),
    _currency("OvertimeIncome", "overtimeIncome", "employment-income"),
    _currency("BonusIncome", "bonusIncome", "employment-income"),

    # Other income
    _currency("RentalIncome", "rentalIncome", "other-income"),
    _currency("InvestmentIncome", "investmentIncome", "other-income"),
    _currency("SocialSecurityIncome", "socialSecurityIncome", "other-income"),
    _currency("PensionIncome", "pensionIncome", "other-income"),
    _currency("DisabilityIncome", "disabilityIncome", "other-income"),
    _currency("UnemploymentIncome", "unemploymentIncome", "other-income"),
    _currency("ChildSupportReceived", "childSupportReceived", "other-income"),
    _currency("SpousalSupportReceived", "spousalSupportReceived", "other-income"),
    _currency("OtherIncome", "otherIncomeAmount", "other-income"),
    FieldMapping("OtherIncomeDescription", "otherIncomeDescription", section="other-income"),

    # Housing
    _currency("RentMortgage", "monthlyRentMortgage", "housing-expenses"),
    _currency("PropertyTaxes", "propertyTaxes", "housing-expenses"),
    _currency("HomeInsurance", "homeownersInsurance", "housing-expenses"),
    _currency("HOAFees", "hoaFees", "housing-expenses"),
    _currency("HomeMaintenance", "homeMaintenance", "housing-expenses"),

    # Utilities
    _currency("Electricity", "electricity", "utility-expenses"),
    _currency("GasHeating", "gasHeating", "utility-expenses"),
    _currency("WaterSewer", "waterSewer", "utility-expenses"),
    _currency("PhoneCell", "phoneCell", "utility-expenses"),
    _currency("InternetCable", "internetCable", "utility-expenses"),

    # Transportation
    _currency("CarPayment", "carPayment", "transportation-expenses"),
    _currency("CarInsurance", "carInsurance", "transportation-expenses"),
    _currency("GasFuel", "gasFuel", "transportation-expenses"),
    _currency("CarMaintenance", "carMaintenance", "transportation-expenses"),
    _currency("ParkingTolls", "parkingTolls", "transportation-expenses"),
    _currency("PublicTransportation", "publicTransportation", "transportation-expenses"),

    # Food and personal
    _currency("Groceries", "groceries", "food-personal-expenses"),
    _currency("DiningOut", "diningOut", "food-personal-expenses"),
    _currency("Clothing", "clothing", "food-personal-expenses"),
    _currency("PersonalCare", "personalCare", "food-personal-expenses"),

    # Healthcare
    _currency("HealthInsurance", "healthInsurance", "healthcare-expenses"),
    _currency("DentalInsurance", "dentalInsurance", "healthcare-expenses"),
    _currency("MedicalOutOfPocket", "medicalOutOfPocket", "healthcare-expenses"),

    # Children
    _currency("ChildcareDaycare", "childcareDaycare", "children-expenses"),
    _currency("ChildTuition", "childTuition", "children-expenses"),
    _currency("ChildActivities", "childActivities", "children-expenses"),
    _currency("ChildSupportPaid", "childSupportPaid", "children-expenses"),

    # Other expenses
    _currency("LifeInsurance", "lifeInsurance", "other-expenses"),
    _currency("Entertainment", "entertainment", "other-expenses"),

    # Real estate
    _currency("PrimaryResidenceValue", "primaryResidenceValue", "real-estate-assets"),
    _currency("PrimaryResidenceMortgage", "primaryResidenceMortgage", "real-estate-assets"),
    _currency("OtherPropertyValue", "otherPropertyValue", "real-estate-assets"),
    _currency("OtherPropertyMortgage", "otherPropertyMortgage", "real-estate-assets"),

    # Vehicles
    FieldMapping("Vehicle1Description", "vehicle1Description", section="vehicle-assets"),
    _currency("Vehicle1Value", "vehicle1Value", "vehicle-assets"),
    _currency("Vehicle1Loan", "vehicle1Loan", "vehicle-assets"),
    FieldMapping("Vehicle2Description", "vehicle2Description", section="vehicle-assets"),
    _currency("Vehicle2Value", "vehicle2Value", "vehicle-assets"),
    _currency("Vehicle2Loan", "vehicle2Loan", "vehicle-assets"),

    # Financial accounts
    _currency("CheckingBalance", "checkingBalance", "financial-accounts"),
    _currency("SavingsBalance", "savingsBalance", "financial-accounts"),
    _currency("InvestmentBalance", "investmentBalance", "financial-accounts"),
    _currency("Retirement401k", "retirement401k", "financial-accounts"),
    _currency("RetirementIRA", "retirementIra", "financial-accounts"),
    _currency("PensionValue", "pensionValue", "financial-accounts"),
    _currency("CashOnHand", "cashOnHand", "financial-accounts"),

    # Debts
    _currency("CreditCardDebt", "creditCardDebt", "debts"),
    _currency("StudentLoanDebt", "studentLoanDebt", "debts"),
    _currency("PersonalLoanDebt", "personalLoanDebt", "debts"),
    _currency("MedicalDebt", "medicalDebt", "debts"),
    _currency("TaxDebt", "taxDebt", "debts"),
    _currency("OtherDebt", "otherDebt", "debts"),
    FieldMapping("OtherDebtDescription", "otherDebtDescription", section="debts"),
]

PARENTING_PLAN_FIELD_MAP: List[FieldMapping] = [
    # Children
    FieldMapping("NumberOfChildren", "childrenCount", required=True, section="children-info"),
    FieldMapping("Child1Name", "child1Name", required=True, section="children-info"),
    FieldMapping("Child1DOB", "child1Dob", format_date, section="children-info"),
    FieldMapping("Child1School", "child1School", section="children-info"),
    FieldMapping("Child1SpecialNeeds", "child1SpecialNeeds", section="children-info"),
    FieldMapping("Child2Name", "child2Name", section="children-info"),
    FieldMapping("Child2DOB", "child2Dob", format_date, section="children-info"),
    FieldMapping("Child2School", "child2School", section="children-info"),
    FieldMapping("Child3Name", "child3Name", section="children-info"),
    FieldMapping("Child3DOB", "child3Dob", format_date, section="children-info"),

    # Decision making
    FieldMapping("EducationDecisionMaking", "educationAuthority", format_decision_making, section="decision-making"),
    FieldMapping("HealthcareDecisionMaking", "healthcareAuthority", format_decision_making, section="decision-making"),
    FieldMapping("ReligiousDecisionMaking", "religiousAuthority", format_decision_making, section="decision-making"),
    FieldMapping(
        "ExtracurricularDecisionMaking", "extracurricularAuthority", format_decision_making,
        section="decision-making",
    ),

    # Regular schedule
    FieldMapping("ScheduleType", "scheduleType", format_schedule_type, required=True, section="regular-schedule"),
    FieldMapping("PrimaryResidence", "primaryResidence", format_parent, section="regular-schedule"),
    FieldMapping("MidweekVisit", "midweekVisit", format_yes_no_checkbox, section="regular-schedule"),
    FieldMapping("MidweekVisitDay", "midweekVisitDay", section="regular-schedule"),

    # Holidays
    FieldMapping("ThanksgivingOdd", "thanksgivingOddYears", format_parent, section="holidays"),
    FieldMapping("ChristmasEveOdd", "christmasEveOddYears", format_parent, section="holidays"),
    FieldMapping("ChristmasDayOdd", "christmasDayOddYears", format_parent, section="holidays"),
    FieldMapping("SpringBreak", "springBreak", section="holidays"),

    # Summer
    FieldMapping("VacationWeeks", "summerVacationWeeks", section="summer-schedule"),
    FieldMapping("VacationNotice", "vacationNoticeDays", section="summer-schedule"),

    # Communication
    FieldMapping("ChildPhoneContact", "childPhoneContact", format_yes_no_checkbox, section="communication"),

    # Additional provisions
    FieldMapping("RightOfFirstRefusal", "rightOfFirstRefusal", format_yes_no_checkbox, section="additional-provisions"),
    FieldMapping("RefusalHours", "refusalHours", section="additional-provisions"),
    FieldMapping("RelocationNotice", "relocationNotice", section="additional-provisions"),
    FieldMapping("AdditionalProvisions", "additionalNotes", section="additional-provisions"),
]


DOCUMENT_FIELD_MAPS: Dict[str, List[FieldMapping]] = {
    "petition-no-children": PETITION_NO_CHILDREN_FIELD_MAP,
    "petition-with-children": PETITION_WITH_CHILDREN_FIELD_MAP,
    "financial-affidavit": FINANCIAL_AFFIDAVIT_FIELD_MAP,
    "parenting-plan": PARENTING_PLAN_FIELD_MAP,
}

SUPPORTED_DOCUMENT_TYPES = tuple(DOCUMENT_FIELD_MAPS)


def get_field_mapping(document_type: str) -> List[FieldMapping]:
    """Return the mapping table for a document type, or [] if unknown."""
    return list(DOCUMENT_FIELD_MAPS.get(document_type, []))


def get_source_fields(document_type: str) -> List[str]:
    """List the questionnaire fields a document type reads."""
    return _table_source_fields(get_field_mapping(document_type))
