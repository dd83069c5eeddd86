"""
Request Catalog

Predefined Web API functions (GET) and actions (POST), keyed by request
name, e.g. "WhoAmIRequest". Entries are templates: specialize them with
Request.with_().
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from .descriptor import Request


class UnknownRequestError(KeyError):
    """Requested name is not in the catalog"""
    pass


# (method, name, bound, entity_name)
_CATALOG_ROWS = (
    # Functions
    ("GET", "CalculateRollupField", False, ""),
    ("GET", "CalculateTotalTimeIncident", True, "incident"),
    ("GET", "CheckIncomingEmail", False, ""),
    ("GET", "CheckPromoteEmail", False, ""),
    ("GET", "DownloadReportDefinition", True, "report"),
    ("GET", "ExpandCalendar", True, "calendar"),
    ("GET", "ExportFieldTranslation", False, ""),
    ("GET", "FetchXmlToQueryExpression", False, ""),
    ("GET", "FindParentResourceGroup", True, "resourcegroup"),
    ("GET", "GetAllTimeZonesWithDisplayName", True, ""),
    ("GET", "GetDefaultPriceLevel", True, ""),
    ("GET", "GetDistinctValuesImportFile", True, "importfile"),
    ("GET", "GetHeaderColumnsImportFile", True, "importfile"),
    ("GET", "GetQuantityDecimal", True, ""),
    ("GET", "GetReportHistoryLimit", True, "report"),
    ("GET", "GetTimeZoneCodeByLocalizedName", False, ""),
    ("GET", "GetValidManyToMany", False, ""),
    ("GET", "GetValidReferencedEntities", False, ""),
    ("GET", "GetValidReferencingEntities", False, ""),
    ("GET", "IncrementKnowledgeArticleViewCount", False, ""),
    ("GET", "InitializeFrom", False, ""),
    ("GET", "IsComponentCustomizable", False, ""),
    ("GET", "IsDataEncryptionActive", False, ""),
    ("GET", "IsValidStateTransition", False, ""),
    ("GET", "QueryMultipleSchedules", False, ""),
    ("GET", "QuerySchedule", False, ""),
    ("GET", "RetrieveAbsoluteAndSiteCollectionUrl", True, ""),
    ("GET", "RetrieveActivePath", False, ""),
    ("GET", "RetrieveAllChildUsersSystemUser", True, "systemuser"),
    ("GET", "RetrieveAllEntities", False, ""),
    ("GET", "RetrieveApplicationRibbon", False, ""),
    ("GET", "RetrieveAuditPartitionList", False, ""),
    ("GET", "RetrieveAvailableLanguages", False, ""),
    ("GET", "RetrieveBusinessHierarchyBusinessUnit", True, "businessunit"),
    ("GET", "RetrieveByGroupResource", True, "resourcegroup"),
    ("GET", "RetrieveByResourceResourceGroup", True, "resource"),
    ("GET", "RetrieveByResourcesService", False, ""),
    ("GET", "RetrieveByTopIncidentProductKbArticle", True, "product"),
    ("GET", "RetrieveByTopIncidentSubjectKbArticle", True, "subject"),
    ("GET", "RetrieveCurrentOrganization", False, ""),
    ("GET", "RetrieveDataEncryptionKey", False, ""),
    ("GET", "RetrieveDependenciesForDelete", False, ""),
    ("GET", "RetrieveDependenciesForUninstall", False, ""),
    ("GET", "RetrieveDependentComponents", False, ""),
    ("GET", "RetrieveDeploymentLicenseType", False, ""),
    ("GET", "RetrieveDeprovisionedLanguages", False, ""),
    ("GET", "RetrieveDuplicates", False, ""),
    ("GET", "RetrieveEntityChanges", False, ""),
    ("GET", "RetrieveEntityRibbon", False, ""),
    ("GET", "RetrieveExchangeAppointments", False, ""),
    ("GET", "RetrieveExchangeRate", False, ""),
    ("GET", "RetrieveFilteredForms", True, ""),
    ("GET", "RetrieveFormattedImportJobResults", False, ""),
    ("GET", "RetrieveInstalledLanguagePacks", False, ""),
    ("GET", "RetrieveInstalledLanguagePackVersion", False, ""),
    ("GET", "RetrieveLicenseInfo", False, ""),
    ("GET", "RetrieveLocLabels", False, ""),
    ("GET", "RetrieveMailboxTrackingFolders", False, ""),
    ("GET", "RetrieveMembersBulkOperation", True, "bulkoperation"),
    ("GET", "RetrieveMissingComponents", False, ""),
    ("GET", "RetrieveMissingDependencies", False, ""),
    ("GET", "RetrieveOrganizationResources", False, ""),
    ("GET", "RetrieveParentGroupsResourceGroup", False, ""),
    ("GET", "RetrieveParsedDataImportFile", False, ""),
    ("GET", "RetrievePersonalWall", True, ""),
    ("GET", "RetrievePrincipalAccess", True, ""),
    ("GET", "RetrievePrincipalAttributePrivileges", True, ""),
    ("GET", "RetrievePrincipalSyncAttributeMappings", True, ""),
    ("GET", "RetrievePrivilegeSet", True, ""),
    ("GET", "RetrieveProcessInstances", False, ""),
    ("GET", "RetrieveProductProperties", True, ""),
    ("GET", "RetrieveProvisionedLanguagePackVersion", False, ""),
    ("GET", "RetrieveProvisionedLanguages", False, ""),
    ("GET", "RetrieveRecordWall", True, ""),
    ("GET", "RetrieveRequiredComponents", False, ""),
    ("GET", "RetrieveRolePrivilegesRole", False, ""),
    ("GET", "RetrieveSubGroupsResourceGroup", True, "resourcegroup"),
    ("GET", "RetrieveTeamPrivileges", True, "team"),
    ("GET", "RetrieveTimestamp", False, ""),
    ("GET", "RetrieveUnpublishedMultiple", True, ""),
    ("GET", "RetrieveUserPrivileges", True, "systemuser"),
    ("GET", "RetrieveUserQueues", True, "systemuser"),
    ("GET", "RetrieveVersion", False, ""),
    ("GET", "Rollup", False, ""),
    ("GET", "Search", False, ""),
    ("GET", "SearchByBodyKbArticle", True, ""),
    ("GET", "SearchByKeywordsKbArticle", True, ""),
    ("GET", "SearchByTitleKbArticle", True, ""),
    ("GET", "ValidateRecurrenceRule", False, ""),
    ("GET", "WhoAmI", False, ""),
    # Actions
    ("POST", "AddItemCampaign", True, ""),
    ("POST", "AddItemCampaignActivity", False, ""),
    ("POST", "AddListMembersList", False, ""),
    ("POST", "AddMemberList", True, "list"),
    ("POST", "AddMembersTeam", True, "team"),
    ("POST", "AddPrincipalToQueue", True, "queue"),
    ("POST", "AddPrivilegesRole", True, "role"),
    ("POST", "AddRecurrence", True, "appointment"),
    ("POST", "AddSolutionComponent", False, ""),
    ("POST", "AddToQueue", True, "queue"),
    ("POST", "AddUserToRecordTeam", True, "systemuser"),
    ("POST", "ApplyRecordCreationAndUpdateRule", False, ""),
    ("POST", "ApplyRoutingRule", False, ""),
    ("POST", "AutoMapEntity", False, ""),
    ("POST", "Book", False, ""),
    ("POST", "BulkDelete", False, ""),
    ("POST", "BulkDetectDuplicates", False, ""),
    ("POST", "CalculateActualValueOpportunity", True, "opportunity"),
    ("POST", "CalculatePrice", False, ""),
    ("POST", "CanBeReferenced", False, ""),
    ("POST", "CanBeReferencing", False, ""),
    ("POST", "CancelContract", True, "contract"),
    ("POST", "CancelSalesOrder", False, ""),
    ("POST", "CanManyToMany", False, ""),
    ("POST", "CloneAsPatch", False, ""),
    ("POST", "CloneAsSolution", False, ""),
    ("POST", "CloneContract", True, "contract"),
    ("POST", "CloneMobileOfflineProfile", True, "mobileofflineprofile"),
    ("POST", "CloneProduct", True, "product"),
    ("POST", "CloseIncident", False, ""),
    ("POST", "CloseQuote", False, ""),
    ("POST", "CompoundUpdateDuplicateDetectionRule", False, ""),
    ("POST", "ConvertOwnerTeamToAccessTeam", True, "team"),
    ("POST", "ConvertProductToKit", False, ""),
    ("POST", "ConvertQuoteToSalesOrder", False, ""),
    ("POST", "ConvertSalesOrderToInvoice", False, ""),
    ("POST", "CopyCampaign", True, "campaign"),
    ("POST", "CopyCampaignResponse", True, "campaignresponse"),
    ("POST", "CopyDynamicListToStatic", True, "list"),
    ("POST", "CopyMembersList", True, "list"),
    ("POST", "CopySystemForm", True, "systemform"),
    ("POST", "CreateActivitiesList", False, ""),
    ("POST", "CreateCustomerRelationships", False, ""),
    ("POST", "CreateException", True, ""),
    ("POST", "CreateInstance", False, ""),
    ("POST", "CreateKnowledgeArticleTranslation", False, ""),
    ("POST", "CreateKnowledgeArticleVersion", False, ""),
    ("POST", "CreateWorkflowFromTemplate", True, "workflow"),
    ("POST", "DeleteAndPromote", False, ""),
    ("POST", "DeleteAuditData", False, ""),
    ("POST", "DeleteOpenInstances", False, ""),
    ("POST", "DeleteOptionValue", False, ""),
    ("POST", "DeliverIncomingEmail", True, ""),
    ("POST", "DeliverPromoteEmail", True, "email"),
    ("POST", "DeprovisionLanguage", False, ""),
    ("POST", "DistributeCampaignActivity", True, "campaignactivity"),
    ("POST", "ExecuteWorkflow", True, "workflow"),
    ("POST", "ExportMappingsImportMap", True, "importmap"),
    ("POST", "ExportSolution", False, ""),
    ("POST", "ExportTranslation", True, ""),
    ("POST", "FulfillSalesOrder", True, ""),
    ("POST", "FullTextSearchKnowledgeArticle", False, ""),
    ("POST", "GenerateInvoiceFromOpportunity", False, ""),
    ("POST", "GenerateQuoteFromOpportunity", False, ""),
    ("POST", "GenerateSalesOrderFromOpportunity", False, ""),
    ("POST", "GenerateSocialProfile", True, "socialprofile"),
    ("POST", "GetInvoiceProductsFromOpportunity", True, "invoice"),
    ("POST", "GetQuoteProductsFromOpportunity", True, "quote"),
    ("POST", "GetSalesOrderProductsFromOpportunity", True, "salesorder"),
    ("POST", "GetTrackingTokenEmail", False, ""),
    ("POST", "ImportFieldTranslation", False, ""),
    ("POST", "ImportMappingsImportMap", False, ""),
    ("POST", "ImportRecordsImport", True, "import"),
    ("POST", "ImportSolution", False, ""),
    ("POST", "ImportTranslation", False, ""),
    ("POST", "InsertOptionValue", False, ""),
    ("POST", "InsertStatusValue", False, ""),
    ("POST", "InstallSampleData", False, ""),
    ("POST", "InstantiateFilters", True, "systemuser"),
    ("POST", "InstantiateTemplate", False, ""),
    ("POST", "LockInvoicePricing", True, "invoice"),
    ("POST", "LockSalesOrderPricing", True, "salesorder"),
    ("POST", "LoseOpportunity", False, ""),
    ("POST", "Merge", False, ""),
    ("POST", "OrderOption", False, ""),
    ("POST", "ParseImport", True, "import"),
    ("POST", "PickFromQueue", True, "queueitem"),
    ("POST", "ProcessInboundEmail", True, "email"),
    ("POST", "PropagateByExpression", False, ""),
    ("POST", "ProvisionLanguage", False, ""),
    ("POST", "PublishAllXml", False, ""),
    ("POST", "PublishDuplicateRule", True, "duplicaterule"),
    ("POST", "PublishProductHierarchy", True, "product"),
    ("POST", "PublishTheme", True, "theme"),
    ("POST", "PublishXml", False, ""),
    ("POST", "QualifyLead", True, "lead"),
    ("POST", "QualifyMemberList", True, "list"),
    ("POST", "QueryExpressionToFetchXml", False, ""),
    ("POST", "ReassignObjectsOwner", False, ""),
    ("POST", "ReassignObjectsSystemUser", True, "systemuser"),
    ("POST", "Recalculate", True, "goal"),
    ("POST", "ReleaseToQueue", True, "queueitem"),
    ("POST", "RemoveFromQueue", True, "queueitem"),
    ("POST", "RemoveMembersTeam", True, ""),
    ("POST", "RemoveParent", False, ""),
    ("POST", "RemovePrivilegeRole", True, "role"),
    ("POST", "RemoveSolutionComponent", False, ""),
    ("POST", "RemoveUserFromRecordTeam", True, "systemuser"),
    ("POST", "RenewContract", True, "contract"),
    ("POST", "RenewEntitlement", True, "entitlement"),
    ("POST", "ReplacePrivilegesRole", True, "role"),
    ("POST", "Reschedule", False, ""),
    ("POST", "ResetUserFilters", False, ""),
    ("POST", "RevertProduct", False, ""),
    ("POST", "ReviseQuote", False, ""),
    ("POST", "RevokeAccess", False, ""),
    ("POST", "RouteTo", False, ""),
    ("POST", "SendBulkMail", False, ""),
    ("POST", "SendEmail", True, "email"),
    ("POST", "SendEmailFromTemplate", False, ""),
    ("POST", "SendFax", False, ""),
    ("POST", "SendTemplate", False, ""),
    ("POST", "SetBusinessEquipment", False, ""),
    ("POST", "SetBusinessSystemUser", True, "systemuser"),
    ("POST", "SetDataEncryptionKey", False, ""),
    ("POST", "SetFeatureStatus", False, ""),
    ("POST", "SetLocLabels", False, ""),
    ("POST", "SetParentSystemUser", True, "systemuser"),
    ("POST", "SetProcess", False, ""),
    ("POST", "SetReportRelated", False, ""),
    ("POST", "TransformImport", False, ""),
    ("POST", "TriggerServiceEndpointCheck", True, "serviceendpoint"),
    ("POST", "UninstallSampleData", False, ""),
    ("POST", "UnlockInvoicePricing", False, ""),
    ("POST", "UnlockSalesOrderPricing", False, ""),
    ("POST", "UnpublishDuplicateRule", False, ""),
    ("POST", "UpdateFeatureConfig", False, ""),
    ("POST", "UpdateOptionValue", False, ""),
    ("POST", "UpdateProductProperties", False, ""),
    ("POST", "UpdateSolutionComponent", False, ""),
    ("POST", "UpdateStateValue", False, ""),
    ("POST", "Validate", False, ""),
    ("POST", "ValidateSavedQuery", True, ""),
    ("POST", "WinOpportunity", False, ""),
    ("POST", "WinQuote", False, ""),
)


def _build_catalog() -> Mapping[str, Request]:
    requests: Dict[str, Request] = {}
    for method, name, bound, entity_name in _CATALOG_ROWS:
        requests[f"{name}Request"] = Request(
            method=method, name=name, bound=bound, entity_name=entity_name
        )
    return MappingProxyType(requests)


REQUESTS: Mapping[str, Request] = _build_catalog()


def get_request(name: str) -> Request:
    """
    Look up a catalog request.

    Args:
        name: Request name with or without the "Request" suffix
              ("WhoAmIRequest" or "WhoAmI")

    Returns:
        Catalog request template

    Raises:
        UnknownRequestError: If no request has that name
    """
    request = REQUESTS.get(name) or REQUESTS.get(f"{name}Request")
    if request is None:
        raise UnknownRequestError(name)
    return request


def search_requests(
    pattern: str = "", method: Optional[str] = None, bound: Optional[bool] = None
) -> List[str]:
    """Catalog keys containing pattern (case-insensitive), optionally filtered by method and boundness"""
    pattern = pattern.lower()
    matches = []
    for key, request in REQUESTS.items():
        if pattern not in key.lower():
            continue
        if method is not None and request.method != method.upper():
            continue
        if bound is not None and request.bound != bound:
            continue
        matches.append(key)
    return sorted(matches)
