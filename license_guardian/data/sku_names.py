"""Static lookup of Microsoft 365 SKU part numbers to product names.

Matching is case-sensitive substring containment: the first entry whose code
appears inside the requested part number wins. Suffixed variants (``_GOV``,
``_FACULTY``, ``_STUDENT`` ...) are listed ahead of their base code so they
resolve to their own name; unlisted variants fall back to the base product.
"""
from collections import OrderedDict
from types import MappingProxyType
from typing import Mapping, Optional

_SKU_NAME_ENTRIES = (
    ("AAD_BASIC", "Microsoft Entra Basic"),
    ("AAD_PREMIUM_P2", "Microsoft Entra ID P2"),
    ("AAD_PREMIUM", "Microsoft Entra ID P1"),
    ("ADALLOM_O365", "Office 365 Cloud App Security"),
    ("ADALLOM_STANDALONE", "Microsoft Defender for Cloud Apps"),
    ("ADV_COMMS", "Advanced Communications"),
    ("ATA", "Microsoft Defender for Identity"),
    ("ATP_ENTERPRISE_FACULTY", "Microsoft Defender for Office 365 (Plan 1) for Faculty"),
    ("ATP_ENTERPRISE_GOV", "Microsoft Defender for Office 365 (Plan 1) GCC"),
    ("ATP_ENTERPRISE", "Microsoft Defender for Office 365 (Plan 1)"),
    ("AX7_USER_TRIAL", "Microsoft Dynamics AX7 User Trial"),
    ("BUSINESS_VOICE_DIRECTROUTING", "Microsoft 365 Business Voice (without calling plan)"),
    ("BUSINESS_VOICE_MED2_TELCO", "Microsoft 365 Business Voice (US)"),
    ("BUSINESS_VOICE_MED2", "Microsoft 365 Business Voice"),
    ("CCIBOTS_PRIVPREV_VIRAL", "Power Virtual Agents Viral Trial"),
    ("CDSAICAPACITY", "AI Builder Capacity add-on"),
    ("CDS_DB_CAPACITY_GOV", "Common Data Service Database Capacity for Government"),
    ("CDS_DB_CAPACITY", "Common Data Service Database Capacity"),
    ("CDS_FILE_CAPACITY", "Common Data Service for Apps File Capacity"),
    ("CDS_LOG_CAPACITY", "Common Data Service Log Capacity"),
    ("CMPA_addon_GCC", "Compliance Manager Premium Assessment Add-On for GCC"),
    ("CMPA_addon", "Compliance Manager Premium Assessment Add-On"),
    ("CPC_B_1C_2RAM_64GB", "Windows 365 Business 1 vCPU, 2 GB, 64 GB"),
    ("CPC_B_2C_4RAM_64GB", "Windows 365 Business 2 vCPU, 4 GB, 64 GB"),
    ("CPC_B_2C_4RAM_128GB", "Windows 365 Business 2 vCPU, 4 GB, 128 GB"),
    ("CPC_B_2C_8RAM_128GB", "Windows 365 Business 2 vCPU, 8 GB, 128 GB"),
    ("CPC_B_2C_8RAM_256GB", "Windows 365 Business 2 vCPU, 8 GB, 256 GB"),
    ("CPC_B_4C_16RAM_128GB", "Windows 365 Business 4 vCPU, 16 GB, 128 GB"),
    ("CPC_B_4C_16RAM_256GB", "Windows 365 Business 4 vCPU, 16 GB, 256 GB"),
    ("CPC_B_4C_16RAM_512GB", "Windows 365 Business 4 vCPU, 16 GB, 512 GB"),
    ("CPC_B_8C_32RAM_128GB", "Windows 365 Business 8 vCPU, 32 GB, 128 GB"),
    ("CPC_B_8C_32RAM_256GB", "Windows 365 Business 8 vCPU, 32 GB, 256 GB"),
    ("CPC_B_8C_32RAM_512GB", "Windows 365 Business 8 vCPU, 32 GB, 512 GB"),
    ("CPC_E_2C_4GB_128GB", "Windows 365 Enterprise 2 vCPU, 4 GB, 128 GB"),
    ("CPC_E_2C_4GB_256GB", "Windows 365 Enterprise 2 vCPU, 4 GB, 256 GB"),
    ("CPC_E_2C_4GB_64GB", "Windows 365 Enterprise 2 vCPU, 4 GB, 64 GB"),
    ("CPC_E_2C_8GB_128GB", "Windows 365 Enterprise 2 vCPU, 8 GB, 128 GB"),
    ("CPC_E_2C_8GB_256GB", "Windows 365 Enterprise 2 vCPU, 8 GB, 256 GB"),
    ("CPC_E_4C_16GB_128GB", "Windows 365 Enterprise 4 vCPU, 16 GB, 128 GB"),
    ("CPC_E_4C_16GB_256GB", "Windows 365 Enterprise 4 vCPU, 16 GB, 256 GB"),
    ("CPC_E_4C_16GB_512GB", "Windows 365 Enterprise 4 vCPU, 16 GB, 512 GB"),
    ("CPC_E_8C_32GB_128GB", "Windows 365 Enterprise 8 vCPU, 32 GB, 128 GB"),
    ("CPC_E_8C_32GB_256GB", "Windows 365 Enterprise 8 vCPU, 32 GB, 256 GB"),
    ("CPC_E_8C_32GB_512GB", "Windows 365 Enterprise 8 vCPU, 32 GB, 512 GB"),
    ("CRM_HYBRIDCONNECTOR", "Dynamics 365 Hybrid Connector"),
    ("CRM_ONLINE_PORTAL", "Dynamics 365 Enterprise Edition - Additional Portal (Qualified Offer)"),
    ("CRMINSTANCE", "Dynamics 365 - Additional Production Instance"),
    ("CRMPLAN2", "Microsoft Dynamics CRM Online Basic"),
    ("CRMSTANDARD", "Microsoft Dynamics CRM Online"),
    ("CRMSTORAGE", "Microsoft Dynamics CRM Online Additional Storage"),
    ("D365_CUSTOMER_SERVICE_ENT_ATTACH", "Dynamics 365 Customer Service Enterprise Attach"),
    ("D365_FIELD_SERVICE_ATTACH", "Dynamics 365 Field Service Attach"),
    ("D365_MARKETING_USER", "Dynamics 365 Marketing USL"),
    ("D365_SALES_ENT_ATTACH", "Dynamics 365 Sales Enterprise Attach"),
    ("D365_SALES_PRO_ATTACH", "Dynamics 365 Sales Professional Attach to Qualifying Dynamics 365 Base Offer"),
    ("D365_SALES_PRO_IW", "Dynamics 365 for Sales Professional Trial"),
    ("D365_SALES_PRO", "Dynamics 365 for Sales Professional"),
    ("DEFENDER_ENDPOINT_P1_EDU", "Microsoft Defender for Endpoint P1 for EDU"),
    ("DEFENDER_ENDPOINT_P1", "Microsoft Defender for Endpoint P1"),
    ("DESKLESSPACK_GOV", "Office 365 F3 GCC"),
    ("DESKLESSPACK", "Office 365 F3"),
    ("DEVELOPERPACK_E5", "Microsoft 365 E5 Developer (without Windows and Audio Conferencing)"),
    ("DEVELOPERPACK", "Office 365 E3 Developer"),
    ("DYN365_ASSETMANAGEMENT", "Dynamics 365 Asset Management Addl Assets"),
    ("DYN365_AI_SERVICE_INSIGHTS", "Dynamics 365 Customer Service Insights Trial"),
    ("DYN365_BUSCENTRAL_ADD_ENV_ADDON", "Dynamics 365 Business Central Additional Environment Addon"),
    ("DYN365_BUSCENTRAL_DB_CAPACITY", "Dynamics 365 Business Central Database Capacity"),
    ("DYN365_BUSCENTRAL_ESSENTIAL", "Dynamics 365 Business Central Essentials"),
    ("DYN365_BUSCENTRAL_PREMIUM", "Dynamics 365 Business Central Premium"),
    ("DYN365_BUSCENTRAL_TEAM_MEMBER", "Dynamics 365 Business Central Team Members"),
    ("DYN365_BUSINESS_MARKETING", "Dynamics 365 Marketing Business Edition"),
    ("DYN365_CUSTOMER_INSIGHTS_VIRAL", "Dynamics 365 Customer Insights vTrial"),
    ("DYN365_CUSTOMER_SERVICE_PRO", "Dynamics 365 Customer Service Professional"),
    ("DYN365_CUSTOMER_VOICE_ADDON", "Dynamics 365 Customer Voice Additional Responses"),
    ("DYN365_ENTERPRISE_CASE_MANAGEMENT", "Dynamics 365 for Case Management Enterprise Edition"),
    ("DYN365_ENTERPRISE_CUSTOMER_SERVICE", "Dynamics 365 for Customer Service Enterprise Edition"),
    ("DYN365_ENTERPRISE_FIELD_SERVICE", "Dynamics 365 for Field Service Enterprise Edition"),
    ("DYN365_ENTERPRISE_P1_IW", "Dynamics 365 P1 Trial for Information Workers"),
    ("DYN365_ENTERPRISE_PLAN1", "Dynamics 365 Customer Engagement Plan"),
    ("DYN365_ENTERPRISE_SALES_CUSTOMERSERVICE", "Dynamics 365 for Sales and Customer Service Enterprise Edition"),
    ("DYN365_ENTERPRISE_SALES", "Dynamics 365 for Sales Enterprise Edition"),
    ("DYN365_ENTERPRISE_TEAM_MEMBERS", "Dynamics 365 for Team Members Enterprise Edition"),
    ("DYN365_FINANCE", "Dynamics 365 Finance"),
    ("DYN365_FINANCIALS_BUSINESS_SKU", "Dynamics 365 for Financials Business Edition"),
    ("DYN365_FINANCIALS_TEAM_MEMBERS_SKU", "Dynamics 365 for Team Members Business Edition"),
    ("DYN365_MARKETING_APPLICATION_ADDON", "Dynamics 365 Marketing Additional Application"),
    ("DYN365_MARKETING_APP", "Dynamics 365 Marketing"),
    ("DYN365_MARKETING_SANDBOX_APPLICATION_ADDON", "Dynamics 365 Marketing Additional Non-Prod Application"),
    ("DYN365_REGULATORY_SERVICE", "Dynamics 365 Regulatory Service - Enterprise Edition Trial"),
    ("DYN365_RETAIL_TRIAL", "Dynamics 365 Commerce Trial"),
    ("DYN365_SALES_PREMIUM", "Dynamics 365 Sales Premium"),
    ("DYN365_SALES_PRO", "Dynamics 365 Sales Professional"),
    ("DYN365_SCM", "Dynamics 365 for Supply Chain Management"),
    ("DYN365_TEAM_MEMBERS", "Dynamics 365 Team Members"),
    ("Dynamics_365_Customer_Service_Enterprise_viral_trial", "Dynamics 365 Customer Service Enterprise Viral Trial"),
    ("Dynamics_365_Field_Service_Enterprise_viral_trial", "Dynamics 365 Field Service Viral Trial"),
    ("Dynamics_365_Hiring_SKU", "Dynamics 365 Talent: Attract"),
    ("Dynamics_365_Onboarding_SKU", "Dynamics 365 Talent: Onboard"),
    ("Dynamics_365_Sales_Field_Service_and_Customer_Service_Partner_Sandbox", "Dynamics 365 Sales, Field Service and Customer Service Partner Sandbox"),
    ("Dynamics_365_for_Operations_Devices", "Dynamics 365 Operations - Device"),
    ("Dynamics_365_for_Operations_Sandbox_Tier2_SKU", "Dynamics 365 Operations - Sandbox Tier 2: Standard Acceptance Testing"),
    ("Dynamics_365_for_Operations_Sandbox_Tier4_SKU", "Dynamics 365 Operations - Sandbox Tier 4: Standard Performance Testing"),
    ("Dynamics_365_for_Operations", "Dynamics 365 UNF OPS Plan ENT Edition"),
    ("Dynamics_365_Sales_Premium_Viral_Trial", "Dynamics 365 Sales Premium Viral Trial"),
    ("E3_VDA_only", "Windows 10/11 Enterprise E3 (VDA)"),
    ("ECAL_SERVICES", "ECAL"),
    ("EMS_EDU_FACULTY", "Enterprise Mobility + Security A3 for Faculty"),
    ("EMS_GOV", "Enterprise Mobility + Security G3 GCC"),
    ("EMSPREMIUM_GOV", "Enterprise Mobility + Security G5 GCC"),
    ("EMSPREMIUM", "Enterprise Mobility + Security E5"),
    ("IDENTITY_THREAT_PROTECTION_FOR_EMS_E5", "Microsoft 365 E5 Security for EMS E5"),
    ("EMS", "Enterprise Mobility + Security E3"),
    ("Defender_Threat_Intelligence", "Defender Threat Intelligence"),
    ("ENTERPRISEPACKPLUS_FACULTY", "Office 365 A3 for faculty"),
    ("ENTERPRISEPACKPLUS_STUDENT", "Office 365 A3 for students"),
    ("ENTERPRISEPACKPLUS_STUUSEBNFT", "Office 365 A3 for students use benefit"),
    ("ENTERPRISEPACK_GOV", "Office 365 G3 GCC"),
    ("ENTERPRISEPACK_USGOV_DOD", "Office 365 E3_USGOV_DOD"),
    ("ENTERPRISEPACK_USGOV_GCCHIGH", "Office 365 E3_USGOV_GCCHIGH"),
    ("ENTERPRISEPACK", "Office 365 E3"),
    ("ENTERPRISEPREMIUM_FACULTY", "Office 365 A5 for faculty"),
    ("ENTERPRISEPREMIUM_GOV", "Office 365 G5 GCC"),
    ("ENTERPRISEPREMIUM_NOPSTNCONF", "Office 365 E5 Without Audio Conferencing"),
    ("ENTERPRISEPREMIUM_STUDENT", "Office 365 A5 for students"),
    ("ENTERPRISEPREMIUM", "Office 365 E5"),
    ("ENTERPRISEWITHSCAL", "Office 365 E4"),
    ("EOP_ENTERPRISE", "Exchange Online Protection"),
    ("EQUIVIO_ANALYTICS_GOV", "Office 365 Advanced Compliance for GCC"),
    ("EQUIVIO_ANALYTICS", "Office 365 Advanced Compliance"),
    ("ERP_TRIAL_INSTANCE", "Dynamics 365 Operations Trial Environment"),
    ("EXCHANGEARCHIVE_ADDON", "Exchange Online Archiving for Exchange Online"),
    ("EXCHANGEARCHIVE", "Exchange Online Archiving for Exchange Server"),
    ("EXCHANGEDESKLESS", "Exchange Online Kiosk"),
    ("EXCHANGEENTERPRISE_FACULTY", "Exchange Online (Plan 2) for Faculty"),
    ("EXCHANGEENTERPRISE", "Exchange Online (Plan 2)"),
    ("EXCHANGEESSENTIALS", "Exchange Online Essentials (ExO P1 Based)"),
    ("EXCHANGE_S_ESSENTIALS", "Exchange Online Essentials"),
    ("EXCHANGESTANDARD_ALUMNI", "Exchange Online (Plan 1) for Alumni with Yammer"),
    ("EXCHANGESTANDARD_GOV", "Exchange Online (Plan 1) for GCC"),
    ("EXCHANGESTANDARD_STUDENT", "Exchange Online (Plan 1) for Students"),
    ("EXCHANGESTANDARD", "Exchange Online (Plan 1)"),
    ("EXPERTS_ON_DEMAND", "Microsoft Threat Experts - Experts on Demand"),
    ("EXCHANGETELCO", "Exchange Online POP"),
    ("FLOW_BUSINESS_PROCESS", "Power Automate per flow plan"),
    ("FLOW_FREE", "Microsoft Power Automate Free"),
    ("FLOW_P2", "Microsoft Power Automate Plan 2"),
    ("FLOW_PER_USER_DEPT", "Power Automate per user plan dept"),
    ("FLOW_PER_USER_GCC", "Power Automate per user plan for Government"),
    ("FLOW_PER_USER", "Power Automate per user plan"),
    ("FORMS_PRO", "Dynamics 365 Customer Voice Trial"),
    ("Forms_Pro_USL", "Dynamics 365 Customer Voice Additional Responses"),
    ("GUIDES_USER", "Dynamics 365 Guides"),
    ("IDENTITY_THREAT_PROTECTION", "Microsoft 365 E5 Security"),
    ("INFOPROTECTION_P2", "Azure Information Protection Premium P2"),
    ("INFORMATION_PROTECTION_COMPLIANCE", "Microsoft 365 E5 Compliance"),
    ("INSIDER_RISK", "Microsoft Purview Insider Risk Management"),
    ("INTUNE_A_D_GOV", "Microsoft Intune Device for Government"),
    ("INTUNE_A_D", "Microsoft Intune Device"),
    ("INTUNE_A_VL", "Intune (Volume License)"),
    ("INTUNE_A", "Microsoft Intune Plan 1"),
    ("INTUNE_EDU", "Intune for Education"),
    ("INTUNE_SMB", "Microsoft Intune SMB"),
    ("IT_ACADEMY_AD", "MS Imagine Academy"),
    ("LITEPACK_P2", "Office 365 Small Business Premium"),
    ("LITEPACK", "Office 365 Small Business"),
    ("M365EDU_A1", "Microsoft 365 A1"),
    ("M365EDU_A3_FACULTY", "Microsoft 365 A3 for Faculty"),
    ("M365EDU_A3_STUDENT", "Microsoft 365 A3 for Students"),
    ("M365EDU_A3_STUUSEBNFT_RPA1", "Microsoft 365 A3 - Unattended License"),
    ("M365EDU_A3_STUUSEBNFT", "Microsoft 365 A3 for students use benefit"),
    ("M365EDU_A5_FACULTY", "Microsoft 365 A5 for Faculty"),
    ("M365EDU_A5_STUDENT", "Microsoft 365 A5 for Students"),
    ("M365EDU_A5_STUUSEBNFT", "Microsoft 365 A5 for students use benefit"),
    ("M365_A5_SUITE_COMPONENTS_FACULTY", "Microsoft 365 A5 Suite features for faculty"),
    ("M365_E5_SUITE_COMPONENTS", "Microsoft 365 E5 Suite features"),
    ("M365_F1_COMM", "Microsoft 365 F1"),
    ("M365_F1_GOV", "Microsoft 365 F3 GCC"),
    ("M365_F1", "Microsoft 365 F1"),
    ("M365_G3_GOV", "Microsoft 365 G3 GCC"),
    ("M365_G5_GCC", "Microsoft 365 GCC G5"),
    ("M365_SECURITY_COMPLIANCE_FOR_FLW", "Microsoft 365 Security and Compliance for Firstline Workers"),
    ("MCOCAP_GOV", "Common Area Phone for GCC"),
    ("MCOCAP", "Common Area Phone"),
    ("MCOEV_DOD", "Microsoft Teams Phone Standard for DOD"),
    ("MCOEV_FACULTY", "Microsoft Teams Phone Standard for Faculty"),
    ("MCOEV_GCCHIGH", "Microsoft Teams Phone Standard for GCCHIGH"),
    ("MCOEV_GOV", "Microsoft Teams Phone Standard for GCC"),
    ("MCOEV_STUDENT", "Microsoft Teams Phone Standard for Students"),
    ("MCOEV_TELSTRA", "Microsoft Teams Phone Standard for TELSTRA"),
    ("MCOEV_USGOV_DOD", "Microsoft Teams Phone Standard_USGOV_DOD"),
    ("MCOEV_USGOV_GCCHIGH", "Microsoft Teams Phone Standard_USGOV_GCCHIGH"),
    ("MCOEVSMB_1", "Microsoft Teams Phone Standard for Small and Medium Business"),
    ("MCOEV", "Microsoft Teams Phone Standard"),
    ("MCOIMP", "Skype for Business Online (Plan 1)"),
    ("MCOMEETACPEA", "Microsoft 365 Audio Conferencing Pay-Per-Minute - EA"),
    ("MCOMEETADV_GOV", "Microsoft 365 Audio Conferencing for GCC"),
    ("MCOMEETADV", "Microsoft 365 Audio Conferencing"),
    ("MCOPSTN_1_GOV", "Microsoft 365 Domestic Calling Plan for GCC"),
    ("MCOPSTN_5", "Skype for Business PSTN Domestic Calling (120 Minutes)"),
    ("MCOPSTN1", "Skype for Business PSTN Domestic Calling"),
    ("MCOPSTN2", "Skype for Business PSTN Domestic and International Calling"),
    ("MCOPSTNC", "Communications Credits"),
    ("MCOPSTNPP", "Skype for Business PSTN Usage Calling Plan"),
    ("MCOPSTNEAU2", "Telstra Calling for O365"),
    ("MCOSTANDARD_GOV", "Skype for Business Online (Plan 2) for Government"),
    ("MCOSTANDARD_MIDMARKET", "Skype for Business Online (Plan 2) for Midsize"),
    ("MCOSTANDARD", "Skype for Business Online (Plan 2)"),
    ("MCOTEAMS_ESSENTIALS", "Teams Phone with Calling Plan"),
    ("MCO_TEAMS_IW", "Microsoft Teams"),
    ("MDATP_Server", "Microsoft Defender for Endpoint Server"),
    ("MDATP_XPLAT", "Microsoft Defender for Endpoint P2_XPLAT"),
    ("MDE_SMB", "Microsoft Defender for Business"),
    ("MEETING_ROOM_NOAUDIOCONF", "Microsoft Teams Rooms Standard without Audio Conferencing"),
    ("MEETING_ROOM", "Microsoft Teams Rooms Standard"),
    ("MFA_STANDALONE", "Microsoft Azure Multi-Factor Authentication"),
    ("MICROSOFT_BUSINESS_CENTER", "Microsoft Business Center"),
    ("MICROSOFT_REMOTE_ASSIST_HOLOLENS", "Dynamics 365 Remote Assist HoloLens"),
    ("MICROSOFT_REMOTE_ASSIST", "Dynamics 365 Remote Assist"),
    ("Microsoft365_Lighthouse", "Microsoft 365 Lighthouse"),
    ("Microsoft_365_Business_Basic_EEA_(no_Teams)", "Microsoft 365 Business Basic EEA (no Teams)"),
    ("Microsoft_365_Business_Premium_EEA_(no_Teams)", "Microsoft 365 Business Premium EEA (no Teams)"),
    ("Microsoft_365_Business_Standard_EEA_(no_Teams)", "Microsoft 365 Business Standard EEA (no Teams)"),
    ("Microsoft_365_Copilot", "Microsoft 365 Copilot"),
    ("Microsoft_365_E3_(no_Teams)", "Microsoft 365 E3 (no Teams)"),
    ("Microsoft_365_E3", "Microsoft 365 E3 (500 seats min)_HUB"),
    ("Microsoft_365_E5_(no_Teams)", "Microsoft 365 E5 (no Teams)"),
    ("Microsoft_365_E5", "Microsoft 365 E5 (500 seats min)_HUB"),
    ("Microsoft_Cloud_for_Sustainability_vTrial", "Microsoft Cloud for Sustainability vTrial"),
    ("Microsoft_Defender_for_Endpoint_F2", "Microsoft Defender for Endpoint F2"),
    ("Microsoft_Entra_ID_Governance", "Microsoft Entra ID Governance"),
    ("Microsoft_Entra_Suite", "Microsoft Entra Suite"),
    ("Microsoft_Intune_Suite", "Microsoft Intune Suite"),
    ("Microsoft_Teams_Audio_Conferencing_select_dial_out", "Microsoft Teams Audio Conferencing with dial-out to USA/CAN"),
    ("Microsoft_Teams_Exploratory_Dept", "Microsoft Teams Exploratory Dept (unlimited users)"),
    ("Microsoft_Teams_EEA_New", "Microsoft Teams EEA"),
    ("Microsoft_Teams_Premium", "Microsoft Teams Premium"),
    ("Microsoft_Teams_Rooms_Basic_without_Audio_Conferencing", "Microsoft Teams Rooms Basic without Audio Conferencing"),
    ("Microsoft_Teams_Rooms_Basic", "Microsoft Teams Rooms Basic"),
    ("Microsoft_Teams_Rooms_Pro_without_Audio_Conferencing", "Microsoft Teams Rooms Pro without Audio Conferencing"),
    ("Microsoft_Teams_Rooms_Pro", "Microsoft Teams Rooms Pro"),
    ("MIDSIZEPACK", "Office 365 Midsize Business"),
    ("MS_TEAMS_IW", "Microsoft Teams Trial"),
    ("MTR_PREM", "Teams Rooms Premium"),
    ("Microsoft_Viva_Goals", "Microsoft Viva Goals"),
    ("NONPROFIT_PORTAL", "Nonprofit Portal"),
    ("O365_BUSINESS_ESSENTIALS", "Microsoft 365 Business Basic"),
    ("O365_BUSINESS_PREMIUM", "Microsoft 365 Business Standard"),
    ("O365_BUSINESS", "Microsoft 365 Apps for business"),
    ("O365_w/o_Teams_Bundle_M3", "Microsoft 365 E3 EEA (no Teams)"),
    ("O365_w/o_Teams_Bundle_M5", "Microsoft 365 E5 EEA (no Teams)"),
    ("OFFICE365_MULTIGEO", "Multi-Geo Capabilities in Office 365"),
    ("OFFICESUBSCRIPTION_FACULTY", "Microsoft 365 Apps for Faculty"),
    ("OFFICESUBSCRIPTION_STUDENT", "Microsoft 365 Apps for Students"),
    ("OFFICESUBSCRIPTION_unattended", "Microsoft 365 Apps for enterprise (unattended)"),
    ("OFFICESUBSCRIPTION", "Microsoft 365 Apps for enterprise"),
    ("Office_365_E1_(no_Teams)", "Office 365 E1 (no Teams)"),
    ("Office_365_E3_(no_Teams)", "Office 365 E3 (no Teams)"),
    ("Office_365_E5_(no_Teams)", "Office 365 E5 (no Teams)"),
    ("OFFICE_PROPLUS_DEVICE1", "Microsoft 365 Apps for enterprise (device)"),
    ("PBI_PREMIUM_EM1_ADDON", "Power BI Premium EM1"),
    ("PBI_PREMIUM_EM2_ADDON", "Power BI Premium EM2"),
    ("PBI_PREMIUM_P1_ADDON", "Power BI Premium P1"),
    ("PBI_PREMIUM_PER_USER_ADDON", "Power BI Premium Per User Add-On"),
    ("PBI_PREMIUM_PER_USER_DEPT", "Power BI Premium Per User Dept"),
    ("PBI_PREMIUM_PER_USER", "Power BI Premium Per User"),
    ("PHONESYSTEM_VIRTUALUSER_GOV", "Microsoft Teams Phone Resource Account for GCC"),
    ("PHONESYSTEM_VIRTUALUSER", "Microsoft Teams Phone Resource Account"),
    ("POWERAPPS_DEV", "Microsoft Power Apps for Developer"),
    ("POWERAPPS_INDIVIDUAL_USER", "Power Apps and Logic Flows"),
    ("POWERAPPS_P1_GOV", "Power Apps Plan 1 for Government"),
    ("POWERAPPS_PER_APP_IW", "PowerApps per app baseline access"),
    ("POWERAPPS_PER_APP_NEW", "Power Apps per app plan (1 app or portal)"),
    ("POWERAPPS_PER_APP", "Power Apps per app plan"),
    ("POWERAPPS_PER_USER_GCC", "Power Apps per user plan for Government"),
    ("POWERAPPS_PER_USER", "Power Apps per user plan"),
    ("POWERAPPS_PORTALS_LOGIN_T2", "Power Apps Portals login capacity add-on Tier 2"),
    ("POWERAPPS_PORTALS_LOGIN_T3", "Power Apps Portals login capacity add-on Tier 3"),
    ("POWERAPPS_PORTALS_PAGEVIEW", "Power Apps Portals page view capacity add-on"),
    ("POWERAPPS_VIRAL", "Microsoft Power Apps Plan 2 Trial"),
    ("POWERAUTOMATE_ATTENDED_RPA", "Power Automate per user with attended RPA plan"),
    ("POWERAUTOMATE_UNATTENDED_RPA", "Power Automate unattended RPA add-on"),
    ("POWERBI_PRO_GOV", "Power BI Pro for GCC"),
    ("POWER_BI_ADDON", "Power BI for Office 365 Add-On"),
    ("POWER_BI_INDIVIDUAL_USER", "Power BI"),
    ("POWER_BI_PRO_CE", "Power BI Pro CE"),
    ("POWER_BI_PRO_DEPT", "Power BI Pro Dept"),
    ("POWER_BI_PRO_FACULTY", "Power BI Pro for Faculty"),
    ("POWER_BI_PRO", "Power BI Pro"),
    ("POWER_BI_STANDARD_FACULTY", "Microsoft Fabric (Free) for faculty"),
    ("POWER_BI_STANDARD_STUDENT", "Microsoft Fabric (Free) for student"),
    ("POWER_BI_STANDARD", "Power BI (free)"),
    ("Power_Pages_vTrial_for_Makers", "Power Pages vTrial for Makers"),
    ("PRIVACY_MANAGEMENT_RISK_EDU", "Privacy Management - risk for EDU"),
    ("PRIVACY_MANAGEMENT_RISK", "Privacy Management - risk"),
    ("PROJECTCLIENT", "Project for Office 365"),
    ("PROJECTESSENTIALS_FACULTY", "Project Online Essentials for Faculty"),
    ("PROJECTESSENTIALS_GOV", "Project Online Essentials for GCC"),
    ("PROJECTESSENTIALS", "Project Online Essentials"),
    ("PROJECTONLINE_PLAN_1_FACULTY", "Project Plan 5 for faculty"),
    ("PROJECTONLINE_PLAN_1", "Project Online Premium Without Project Client"),
    ("PROJECTONLINE_PLAN_2", "Project Online With Project for Office 365"),
    ("PROJECTPREMIUM_GOV", "Project Plan 5 for GCC"),
    ("PROJECTPREMIUM", "Project Online Premium"),
    ("PROJECTPROFESSIONAL_FACULTY", "Project Plan 3 for Faculty"),
    ("PROJECTPROFESSIONAL_GOV", "Project Plan 3 for GCC"),
    ("PROJECTPROFESSIONAL", "Project Plan 3"),
    ("PROJECT_MADEIRA_PREVIEW_IW_SKU", "Dynamics 365 Business Central for IWs"),
    ("PROJECT_P1", "Project Plan 1"),
    ("PROJECT_PLAN1_DEPT", "Project Plan 1 (for Department)"),
    ("PROJECT_PLAN3_DEPT", "Project Plan 3 (for Department)"),
    ("RIGHTSMANAGEMENT_ADHOC", "Rights Management Adhoc"),
    ("RIGHTSMANAGEMENT", "Azure Information Protection Plan 1"),
    ("RMSBASIC", "Rights Management Service Basic Content Protection"),
    ("SHAREPOINTENTERPRISE", "SharePoint Online (Plan 2)"),
    ("SHAREPOINTSTANDARD_EDU", "SharePoint (Plan 1) for Education"),
    ("SHAREPOINTSTANDARD", "SharePoint Online (Plan 1)"),
    ("SHAREPOINTSTORAGE_GOV", "Office 365 Extra File Storage for GCC"),
    ("SHAREPOINTSTORAGE", "Office 365 Extra File Storage"),
    ("SKU_Dynamics_365_for_HCM_Trial", "Dynamics 365 for Talent"),
    ("SMB_APPS", "Business Apps (free)"),
    ("SMB_BUSINESS_ESSENTIALS", "Microsoft 365 Business Basic"),
    ("SMB_BUSINESS_PREMIUM", "Microsoft 365 Business Standard - Prepaid Legacy"),
    ("SMB_BUSINESS", "Microsoft 365 Apps for Business"),
    ("SOCIAL_ENGAGEMENT_APP_USER", "Dynamics 365 AI for Market Insights (Preview)"),
    ("SPB", "Microsoft 365 Business Premium"),
    ("SPE_E3_RPA1", "Microsoft 365 E3 - Unattended License"),
    ("SPE_E3_USGOV_DOD", "Microsoft 365 E3_USGOV_DOD"),
    ("SPE_E3_USGOV_GCCHIGH", "Microsoft 365 E3_USGOV_GCCHIGH"),
    ("SPE_E3", "Microsoft 365 E3"),
    ("SPE_E5_CALLINGMINUTES", "Microsoft 365 E5 with Calling Minutes"),
    ("SPE_E5_NOPSTNCONF", "Microsoft 365 E5 without Audio Conferencing"),
    ("SPE_E5", "Microsoft 365 E5"),
    ("SPE_F1", "Microsoft 365 F3"),
    ("SPE_F5_COMP", "Microsoft 365 F5 Compliance Add-on"),
    ("SPE_F5_SECCOMP", "Microsoft 365 F5 Security + Compliance Add-on"),
    ("SPE_F5_SEC", "Microsoft 365 F5 Security Add-on"),
    ("SPZA_IW", "App Connect IW"),
    ("STANDARDPACK_GOV", "Office 365 G1 GCC"),
    ("STANDARDPACK", "Office 365 E1"),
    ("STANDARDWOFFPACK_FACULTY", "Office 365 A1 for faculty"),
    ("STANDARDWOFFPACK_IW_FACULTY", "Office 365 A1 Plus for faculty"),
    ("STANDARDWOFFPACK_IW_STUDENT", "Office 365 A1 Plus for students"),
    ("STANDARDWOFFPACK_STUDENT", "Office 365 A1 for students"),
    ("STANDARDWOFFPACK", "Office 365 E2"),
    ("STREAM_STORAGE", "Microsoft Stream Storage Add-On (500 GB)"),
    ("STREAM", "Microsoft Stream"),
    ("TEAMS_COMMERCIAL_TRIAL", "Microsoft Teams Commercial Cloud"),
    ("TEAMS_ESSENTIALS_AAD", "Microsoft Teams Essentials (AAD Identity)"),
    ("TEAMS_EXPLORATORY", "Microsoft Teams Exploratory"),
    ("TEAMS_FREE", "Microsoft Teams (Free)"),
    ("Teams_Ess", "Microsoft Teams Essentials"),
    ("THREAT_INTELLIGENCE_GOV", "Microsoft Defender for Office 365 (Plan 2) GCC"),
    ("THREAT_INTELLIGENCE", "Microsoft Defender for Office 365 (Plan 2)"),
    ("Teams_Premium_(for_Departments)", "Teams Premium (for Departments)"),
    ("TOPIC_EXPERIENCES", "Viva Topics"),
    ("TVM_Premium_Add_on", "Microsoft Defender Vulnerability Management Add-on"),
    ("TVM_Premium_Standalone", "Microsoft Defender Vulnerability Management"),
    ("UNIVERSAL_PRINT", "Universal Print"),
    ("VIRTUAL_AGENT_BASE", "Power Virtual Agent"),
    ("VIRTUAL_AGENT_USL", "Power Virtual Agent User License"),
    ("VISIOCLIENT_FACULTY", "Visio Plan 2 for Faculty"),
    ("VISIOCLIENT_GOV", "Visio Plan 2 for GCC"),
    ("VISIOCLIENT", "Visio Online Plan 2"),
    ("VISIOONLINE_PLAN1", "Visio Online Plan 1"),
    ("VISIO_PLAN1_DEPT", "Visio Plan 1"),
    ("VISIO_PLAN2_DEPT", "Visio Plan 2"),
    ("VIVA", "Microsoft Viva Suite"),
    ("WACONEDRIVEENTERPRISE", "OneDrive for Business (Plan 2)"),
    ("WACONEDRIVESTANDARD", "OneDrive for Business (Plan 1)"),
    ("WIN10_ENT_A3_FAC", "Windows 10/11 Enterprise A3 for faculty"),
    ("WIN10_ENT_A3_STU", "Windows 10/11 Enterprise A3 for students"),
    ("WIN10_ENT_A5_FAC", "Windows 10/11 Enterprise A5 for faculty"),
    ("WIN10_PRO_ENT_SUB", "Windows 10/11 Enterprise E3"),
    ("WIN10_VDA_E3", "Windows 10/11 Enterprise E3"),
    ("WIN10_VDA_E5", "Windows 10/11 Enterprise E5"),
    ("Viva_Glint_Standalone", "Microsoft Viva Glint"),
    ("WIN_DEF_ATP", "Microsoft Defender for Endpoint"),
    ("WIN_ENT_E5", "Windows 10/11 Enterprise E5 (Original)"),
    ("WINDOWS_STORE", "Windows Store for Business"),
    ("WINE5_GCC_COMPAT", "Windows 10/11 Enterprise E5 Commercial (GCC Compatible)"),
    ("WORKPLACE_ANALYTICS", "Microsoft Workplace Analytics"),
    ("WSFB_EDU_FACULTY", "Windows Store for Business EDU Faculty"),
)

SKU_NAMES: Mapping[str, str] = MappingProxyType(OrderedDict(_SKU_NAME_ENTRIES))


def resolve_sku_name(sku_part_number: Optional[str], table: Mapping[str, str] = SKU_NAMES) -> Optional[str]:
    """Return the product name for a SKU part number, or ``None`` when unknown."""
    if not sku_part_number:
        return None
    for code, name in table.items():
        if code in sku_part_number:
            return name
    return None


def friendly_name(sku_part_number: Optional[str]) -> str:
    return resolve_sku_name(sku_part_number) or ""


class SkuNameResolver:
    """Callable wrapper around a SKU table, for injection into services."""

    def __init__(self, table: Optional[Mapping[str, str]] = None):
        self._table = table if table is not None else SKU_NAMES

    def resolve(self, sku_part_number: Optional[str]) -> Optional[str]:
        return resolve_sku_name(sku_part_number, self._table)

    def friendly_name(self, sku_part_number: Optional[str]) -> str:
        return self.resolve(sku_part_number) or ""
